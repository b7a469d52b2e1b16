"""
Session backed implementation of CartRepository.

The cart lives in the Django session of the browsing client and nowhere else,
so it disappears with the session and is never shared between sessions.
"""
from typing import Any, Dict, MutableMapping
from uuid import UUID

from ...domain.entities.cart import Cart
from ...domain.entities.cart_item import CartItem
from ...domain.repositories.cart_repository import CartRepository

SESSION_KEY = 'cart'


class SessionCartRepository(CartRepository):
    """Stores the cart as plain data under one session key."""

    def __init__(self, session: MutableMapping[str, Any], key: str = SESSION_KEY):
        self.session = session
        self.key = key

    def load(self) -> Cart:
        data = self.session.get(self.key)
        if not data:
            return Cart.create()
        return self._to_entity(data)

    def save(self, cart: Cart) -> Cart:
        self.session[self.key] = self._to_dict(cart)
        # nested data changes are not detected by the session backend
        if hasattr(self.session, 'modified'):
            self.session.modified = True
        return cart

    def delete(self) -> None:
        self.session.pop(self.key, None)

    def _to_dict(self, cart: Cart) -> Dict[str, Any]:
        return {
            'id': str(cart.id),
            'is_open': cart.is_open,
            'items': [
                {
                    'product_id': item.product_id,
                    'product_name': item.product_name,
                    'product_image': item.product_image,
                    'unit_price': item.unit_price,
                    'size': item.size,
                    'color': item.color,
                    'quantity': item.quantity,
                }
                for item in cart.items
            ],
        }

    def _to_entity(self, data: Dict[str, Any]) -> Cart:
        return Cart(
            id=UUID(data['id']),
            is_open=data.get('is_open', False),
            items=[CartItem(**item) for item in data.get('items', [])],
        )
