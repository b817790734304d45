"""Tests for QR code enrichment with product data."""
from unittest.mock import Mock, patch

from django.test import TestCase, override_settings

from ..models import QRCode
from ..services.enrichment import get_qr_code, get_qr_codes, supplement_qr_code

SHOP = 'demo.myshopify.com'
BASE_URL = 'https://qr.example.com'
FAKE_IMAGE = 'data:image/png;base64,AAAA'

PRODUCT = {
    'title': 'Blue shirt',
    'handle': 'blue-shirt',
    'image_url': 'https://cdn.example.com/shirt.png',
    'image_alt': 'A blue shirt',
}


def make_qr_code(**kwargs):
    defaults = {
        'shop': SHOP,
        'title': 'Shirt QR',
        'destination': QRCode.Destination.PRODUCT,
        'product_id': 'gid://shopify/Product/1',
        'product_variant_id': 'gid://shopify/ProductVariant/11',
        'product_handle': 'blue-shirt',
    }
    defaults.update(kwargs)
    return QRCode.objects.create(**defaults)


@patch('apps.qrcodes.services.enrichment.get_qr_code_image', return_value=FAKE_IMAGE)
class SupplementQRCodeTests(TestCase):
    """Tests for single record enrichment."""

    def test_merges_product_data(self, mock_image):
        qr_code = make_qr_code()
        lookup = Mock(return_value=PRODUCT)

        view = supplement_qr_code(qr_code, lookup, BASE_URL)

        lookup.assert_called_once_with('gid://shopify/Product/1')
        mock_image.assert_called_once_with(qr_code.pk, BASE_URL)
        self.assertEqual(view['id'], qr_code.pk)
        self.assertEqual(view['title'], 'Shirt QR')
        self.assertEqual(view['scans'], 0)
        self.assertFalse(view['product_deleted'])
        self.assertEqual(view['product_title'], 'Blue shirt')
        self.assertEqual(view['product_image'], 'https://cdn.example.com/shirt.png')
        self.assertEqual(view['product_alt'], 'A blue shirt')
        self.assertEqual(view['destination_url'], f'https://{SHOP}/products/blue-shirt')
        self.assertEqual(view['image'], FAKE_IMAGE)

    def test_deleted_product_is_not_fatal(self, mock_image):
        """Product missing upstream degrades to product_deleted."""
        qr_code = make_qr_code(destination=QRCode.Destination.CART)

        view = supplement_qr_code(qr_code, Mock(return_value=None), BASE_URL)

        self.assertTrue(view['product_deleted'])
        self.assertIsNone(view['product_title'])
        self.assertIsNone(view['product_image'])
        self.assertIsNone(view['product_alt'])
        self.assertEqual(view['destination_url'], f'https://{SHOP}/cart/11:1')
        self.assertEqual(view['image'], FAKE_IMAGE)

    def test_product_without_image(self, mock_image):
        qr_code = make_qr_code()
        product = {'title': 'Mug', 'handle': 'mug', 'image_url': None, 'image_alt': None}

        view = supplement_qr_code(qr_code, Mock(return_value=product), BASE_URL)

        self.assertFalse(view['product_deleted'])
        self.assertIsNone(view['product_image'])

    def test_lookup_errors_propagate(self, mock_image):
        qr_code = make_qr_code()
        lookup = Mock(side_effect=RuntimeError('upstream down'))

        with self.assertRaises(RuntimeError):
            supplement_qr_code(qr_code, lookup, BASE_URL)

    def test_image_errors_propagate(self, mock_image):
        mock_image.side_effect = ValueError('encoder failed')
        qr_code = make_qr_code()

        with self.assertRaises(ValueError):
            supplement_qr_code(qr_code, Mock(return_value=PRODUCT), BASE_URL)


@patch('apps.qrcodes.services.enrichment.get_qr_code_image', return_value=FAKE_IMAGE)
class GetQRCodeTests(TestCase):

    def test_missing_record_returns_none(self, mock_image):
        lookup = Mock()

        self.assertIsNone(get_qr_code(999, lookup, BASE_URL))
        lookup.assert_not_called()

    def test_returns_enriched_record(self, mock_image):
        qr_code = make_qr_code()

        view = get_qr_code(qr_code.pk, Mock(return_value=PRODUCT), BASE_URL)

        self.assertEqual(view['id'], qr_code.pk)
        self.assertEqual(view['product_title'], 'Blue shirt')

    def test_other_shop_record_returns_none(self, mock_image):
        qr_code = make_qr_code(shop='other.myshopify.com')

        self.assertIsNone(get_qr_code(qr_code.pk, Mock(), BASE_URL, shop=SHOP))


@override_settings(QRCODES_ENRICH_WORKERS=3)
@patch('apps.qrcodes.services.enrichment.get_qr_code_image', return_value=FAKE_IMAGE)
class GetQRCodesTests(TestCase):
    """Tests for list enrichment."""

    def test_empty_shop_makes_no_remote_calls(self, mock_image):
        lookup = Mock()

        self.assertEqual(get_qr_codes(SHOP, lookup, BASE_URL), [])
        lookup.assert_not_called()
        mock_image.assert_not_called()

    def test_newest_first_and_scoped_to_shop(self, mock_image):
        first = make_qr_code(title='First')
        second = make_qr_code(title='Second')
        third = make_qr_code(title='Third')
        make_qr_code(shop='other.myshopify.com', title='Other')

        views = get_qr_codes(SHOP, Mock(return_value=PRODUCT), BASE_URL)

        self.assertEqual([v['id'] for v in views], [third.pk, second.pk, first.pk])

    def test_each_record_enriched_independently(self, mock_image):
        make_qr_code(product_id='gid://shopify/Product/1')
        make_qr_code(product_id='gid://shopify/Product/2')

        def lookup(product_id):
            if product_id.endswith('/2'):
                return None
            return PRODUCT

        views = get_qr_codes(SHOP, lookup, BASE_URL)

        by_product = {v['product_id']: v for v in views}
        self.assertTrue(by_product['gid://shopify/Product/2']['product_deleted'])
        self.assertFalse(by_product['gid://shopify/Product/1']['product_deleted'])
        self.assertEqual(mock_image.call_count, 2)


@override_settings(QRCODES_ENRICH_WORKERS=0)
@patch('apps.qrcodes.services.enrichment.get_qr_code_image', return_value=FAKE_IMAGE)
class WorkerCountTests(TestCase):
    """A non-positive worker setting still enriches with one thread."""

    def test_zero_workers_still_enriches(self, mock_image):
        make_qr_code(title='First')
        make_qr_code(title='Second')

        views = get_qr_codes(SHOP, Mock(return_value=PRODUCT), BASE_URL)

        self.assertEqual([v['title'] for v in views], ['Second', 'First'])
        self.assertEqual(mock_image.call_count, 2)
