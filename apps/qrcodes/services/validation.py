from typing import Optional

from ..models import QRCode

REQUIRED_FIELDS = (
    ('title', 'Title is required'),
    ('product_id', 'Product is required'),
    ('destination', 'Destination is required'),
)


def validate_qr_code(data: dict) -> Optional[dict]:
    """Проверить обязательные поля формы. None, если ошибок нет."""
    errors = {
        field: message
        for field, message in REQUIRED_FIELDS
        if not data.get(field)
    }
    return errors or None


def validate_destination(data: dict) -> Optional[dict]:
    """Destination, when given, must be one of QRCode.Destination."""
    destination = data.get('destination')
    if destination and destination not in QRCode.Destination.values:
        return {'destination': 'Destination must be product or cart'}
    return None
