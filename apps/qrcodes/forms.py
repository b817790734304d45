"""
Состояние формы QR-кода.

The form keeps two snapshots: the draft being edited and the last saved
(clean) values. The form is dirty when they differ.
"""
from types import MappingProxyType
from typing import Mapping, Optional

FORM_FIELDS = (
    'title',
    'destination',
    'product_id',
    'product_variant_id',
    'product_handle',
)

NEW_QR_CODE = {
    'title': '',
    'destination': 'product',
}


def snapshot(data: Optional[Mapping]) -> Mapping:
    """Read-only copy of the form fields of data."""
    data = data or {}
    return MappingProxyType({field: data.get(field) or '' for field in FORM_FIELDS})


def form_data_from_post(post) -> dict:
    """Поля формы из POST-запроса (без shop: он берётся из сессии)."""
    return {field: post.get(field, '').strip() for field in FORM_FIELDS}


class FormState:
    """Draft and clean snapshots of the QR code form."""

    def __init__(self, clean: Optional[Mapping], draft: Optional[Mapping] = None):
        self.clean = snapshot(clean)
        self.draft = snapshot(clean if draft is None else draft)

    @property
    def is_dirty(self) -> bool:
        return dict(self.draft) != dict(self.clean)

    def with_draft(self, draft: Mapping) -> 'FormState':
        return FormState(self.clean, draft)
