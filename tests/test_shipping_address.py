"""
Shipping address validation tests.
"""
import pytest

from apps.orders.domain.value_objects import ShippingAddress
from shared.domain import ValidationError


def test_valid_address_is_trimmed(shipping_address):
    shipping_address['city'] = '  Bengaluru  '
    address = ShippingAddress.from_dict(shipping_address)
    assert address.city == 'Bengaluru'
    assert address.lines[2] == 'Bengaluru, 560001'


@pytest.mark.parametrize('field,value', [
    ('name', 'A'),
    ('address', 'MG'),
    ('city', 'X'),
    ('postal_code', '560'),
    ('country', 'I'),
    ('phone', '98765'),
    ('phone', '9' * 21),
    ('name', 'n' * 101),
])
def test_invalid_field_is_reported(shipping_address, field, value):
    shipping_address[field] = value
    with pytest.raises(ValidationError) as exc_info:
        ShippingAddress.from_dict(shipping_address)
    assert exc_info.value.field == field


def test_missing_field(shipping_address):
    del shipping_address['country']
    with pytest.raises(ValidationError) as exc_info:
        ShippingAddress.from_dict(shipping_address)
    assert exc_info.value.field == 'country'


def test_not_a_mapping():
    with pytest.raises(ValidationError) as exc_info:
        ShippingAddress.from_dict(None)
    assert exc_info.value.field == 'shipping_address'
