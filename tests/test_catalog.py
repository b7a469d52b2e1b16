"""
Catalog and money tests.
"""
import pytest

from apps.products.domain.value_objects import ColorOption, Money, format_price
from apps.products.domain.exceptions import InvalidProductError


class TestStaticProductRepository:

    def test_six_products(self, product_repository):
        assert [p.id for p in product_repository.find_all()] == ['1', '2', '3', '4', '5', '6']

    def test_find_by_id(self, product_repository):
        product = product_repository.find_by_id('2')
        assert product.name == 'Tailored Wool Blazer'
        assert product.price == Money(24999)
        assert product.offers_size('XXL')
        assert product.offers_color('Navy')
        assert not product.offers_color('Cream')

    def test_missing_id(self, product_repository):
        assert product_repository.find_by_id('42') is None

    @pytest.mark.parametrize('category,expected', [
        ('all', 6),
        ('men', 2),
        ('women', 2),
        ('sale', 1),
        ('trending', 1),
    ])
    def test_filter_by_category(self, product_repository, category, expected):
        assert len(product_repository.find_all(category)) == expected

    def test_collections(self, product_repository):
        assert [p.id for p in product_repository.find_new_arrivals()] == ['1', '4']
        assert [p.id for p in product_repository.find_best_sellers()] == ['2', '5']

    def test_sale_flag(self, product_repository):
        assert product_repository.find_by_id('3').is_on_sale
        assert not product_repository.find_by_id('1').is_on_sale


class TestMoney:

    @pytest.mark.parametrize('amount,expected', [
        (0, '₹0'),
        (499, '₹499'),
        (12999, '₹12,999'),
        (124999, '₹1,24,999'),
        (12345678, '₹1,23,45,678'),
    ])
    def test_formats_inr(self, amount, expected):
        assert format_price(amount) == expected

    def test_rejects_float_amount(self):
        with pytest.raises(TypeError):
            Money(12.5)

    def test_add_and_multiply(self):
        assert Money(100).add(Money(50)).multiply(3) == Money(450)


def test_color_option_requires_hex():
    with pytest.raises(InvalidProductError):
        ColorOption(name='Cream', hex='cream')
