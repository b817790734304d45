"""Tests for QR code form validation."""
import unittest

from ..services.validation import validate_destination, validate_qr_code

VALID = {
    'title': 'Summer sale',
    'product_id': 'gid://shopify/Product/1',
    'destination': 'product',
}


class ValidateQRCodeTests(unittest.TestCase):

    def test_valid_data_has_no_errors(self):
        self.assertIsNone(validate_qr_code(VALID))

    def test_each_missing_field_reported(self):
        messages = {
            'title': 'Title is required',
            'product_id': 'Product is required',
            'destination': 'Destination is required',
        }
        for field, message in messages.items():
            with self.subTest(field=field):
                data = {**VALID, field: ''}
                self.assertEqual(validate_qr_code(data), {field: message})

    def test_all_errors_reported_together(self):
        """Missing title and destination yields exactly two entries."""
        errors = validate_qr_code({'product_id': 'gid://shopify/Product/1'})
        self.assertEqual(set(errors), {'title', 'destination'})

    def test_empty_data(self):
        self.assertEqual(len(validate_qr_code({})), 3)

    def test_only_presence_is_checked(self):
        """Values are not validated beyond presence."""
        self.assertIsNone(validate_qr_code({**VALID, 'destination': 'anything'}))


class ValidateDestinationTests(unittest.TestCase):

    def test_known_kinds_accepted(self):
        for destination in ['product', 'cart']:
            with self.subTest(destination=destination):
                self.assertIsNone(validate_destination({'destination': destination}))

    def test_unknown_kind_rejected(self):
        self.assertEqual(
            validate_destination({'destination': 'bogus'}),
            {'destination': 'Destination must be product or cart'}
        )

    def test_missing_kind_left_to_presence_check(self):
        self.assertIsNone(validate_destination({}))
