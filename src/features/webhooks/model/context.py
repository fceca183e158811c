from pydantic import BaseModel, ConfigDict, Field


class ReferredProduct(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/messages#context-object"""
    catalog_id: str | None = None
    product_retailer_id: str | None = None


class Context(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/messages#context-object"""

    model_config = ConfigDict(populate_by_name = True)

    forwarded: bool = False
    frequently_forwarded: bool = False
    from_: str | None = Field(default = None, alias = "from")
    id: str | None = None
    referred_product: ReferredProduct | None = None
    type: str | None = None
