from pydantic import BaseModel

from features.webhooks.model.change_value import ChangeValue


class DisableInfo(BaseModel):
    disable_date: str | None = None


class OtherInfo(BaseModel):
    title: str | None = None
    description: str | None = None


class TemplateStatusUpdate(ChangeValue):
    """https://developers.facebook.com/docs/graph-api/webhooks/reference/whatsapp-business-account/#message_template_status_update"""
    event: str | None = None
    message_template_id: int | None = None
    message_template_name: str | None = None
    message_template_language: str | None = None
    reason: str | None = None
    disable_info: DisableInfo | None = None
    other_info: OtherInfo | None = None


class TemplateCategoryUpdate(ChangeValue):
    """https://developers.facebook.com/docs/graph-api/webhooks/reference/whatsapp-business-account/#template_category_update"""
    message_template_id: int | None = None
    message_template_name: str | None = None
    message_template_language: str | None = None
    previous_category: str | None = None
    new_category: str | None = None


class TemplateQualityUpdate(ChangeValue):
    """https://developers.facebook.com/docs/graph-api/webhooks/reference/whatsapp-business-account/#message_template_quality_update"""
    previous_quality_score: str | None = None
    new_quality_score: str | None = None
    message_template_id: int | None = None
    message_template_name: str | None = None
    message_template_language: str | None = None
