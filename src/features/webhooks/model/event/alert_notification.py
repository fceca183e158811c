from features.webhooks.model.change_value import ChangeValue


class AlertNotification(ChangeValue):
    """https://developers.facebook.com/docs/graph-api/webhooks/reference/whatsapp-business-account/#account_alerts"""
    entity_type: str | None = None
    entity_id: str | None = None
    alert_severity: str | None = None
    alert_status: str | None = None
    alert_type: str | None = None
    alert_description: str | None = None
