from pydantic import BaseModel


class ProductItem(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/messages#order-messages"""
    product_retailer_id: str | None = None
    quantity: int | str | None = None
    item_price: float | str | None = None
    currency: str | None = None


class Order(BaseModel):
    """https://developers.facebook.com/docs/whatsapp/cloud-api/webhooks/reference/messages#order-messages"""
    catalog_id: str | None = None
    product_items: list[ProductItem] = []
    text: str | None = None
