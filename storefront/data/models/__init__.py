from storefront.data.models.cart import CartModel

__all__ = ["CartModel"]
