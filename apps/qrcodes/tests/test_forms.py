"""Tests for QR code form state."""
import unittest

from ..forms import NEW_QR_CODE, FormState, form_data_from_post

SAVED = {
    'id': 7,
    'title': 'Shirt QR',
    'destination': 'cart',
    'product_id': 'gid://shopify/Product/1',
    'product_variant_id': 'gid://shopify/ProductVariant/11',
    'product_handle': 'blue-shirt',
    'scans': 3,
}


class FormStateTests(unittest.TestCase):

    def test_fresh_state_is_clean(self):
        self.assertFalse(FormState(SAVED).is_dirty)
        self.assertFalse(FormState(NEW_QR_CODE).is_dirty)

    def test_change_makes_dirty(self):
        state = FormState(SAVED).with_draft({**SAVED, 'title': 'Renamed'})
        self.assertTrue(state.is_dirty)
        self.assertEqual(state.clean['title'], 'Shirt QR')
        self.assertEqual(state.draft['title'], 'Renamed')

    def test_same_values_are_not_dirty(self):
        """Structural equality, not identity."""
        state = FormState(SAVED).with_draft(dict(SAVED))
        self.assertFalse(state.is_dirty)

    def test_non_form_fields_ignored(self):
        state = FormState(SAVED).with_draft({**SAVED, 'scans': 100})
        self.assertFalse(state.is_dirty)

    def test_snapshots_are_read_only(self):
        state = FormState(SAVED)
        with self.assertRaises(TypeError):
            state.draft['title'] = 'x'

    def test_new_form_defaults(self):
        state = FormState(NEW_QR_CODE)
        self.assertEqual(state.draft['destination'], 'product')
        self.assertEqual(state.draft['title'], '')
        self.assertEqual(state.draft['product_id'], '')


class FormDataFromPostTests(unittest.TestCase):

    def test_strips_and_fills_missing(self):
        data = form_data_from_post({'title': '  Sale ', 'shop': 'evil.myshopify.com'})
        self.assertEqual(data['title'], 'Sale')
        self.assertEqual(data['product_id'], '')
        self.assertNotIn('shop', data)
