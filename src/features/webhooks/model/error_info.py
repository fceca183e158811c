from pydantic import BaseModel, ConfigDict


class ErrorData(BaseModel):
    model_config = ConfigDict(extra = "ignore")

    details: str | None = None
    messaging_product: str | None = None


class ErrorInfo(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/support/error-codes"""

    model_config = ConfigDict(extra = "ignore")

    code: int | None = None
    title: str | None = None
    message: str | None = None
    error_data: ErrorData | None = None
    error_subcode: int | None = None
    error_user_title: str | None = None
    error_user_msg: str | None = None
    fbtrace_id: str | None = None
    type: str | None = None
    href: str | None = None
    details: str | None = None
    error_type: str | None = None
    error_rate: float | None = None
    error_count: int | None = None
