"""
Session cart repository tests.
"""


def test_empty_session_gives_empty_cart(cart_repository):
    cart = cart_repository.load()
    assert cart.is_empty
    assert cart.is_open is False


def test_save_and_load(cart_repository, session):
    cart = cart_repository.load()
    cart.add_item('3', 'Camel Wool Trench Coat', 34999, 'M', 'Camel', 2, '/assets/p3.jpg')
    cart.open()
    cart_repository.save(cart)

    assert session['cart']['items'][0]['unit_price'] == 34999

    loaded = cart_repository.load()
    assert loaded.id == cart.id
    assert loaded.is_open is True
    assert loaded.items == cart.items
    assert loaded.total_price == 69998


def test_delete(cart_repository, session):
    cart = cart_repository.load()
    cart.add_item('3', 'Camel Wool Trench Coat', 34999, 'M', 'Camel')
    cart_repository.save(cart)
    cart_repository.delete()
    assert 'cart' not in session
    assert cart_repository.load().is_empty
