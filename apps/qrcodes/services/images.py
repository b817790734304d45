"""
QR code image generation.
"""
import base64
from io import BytesIO
from urllib.parse import urljoin

import qrcode

QR_VERSION = 1
QR_BOX_SIZE = 10
QR_BORDER = 2
QR_IMAGE_FORMAT = 'PNG'


def get_scan_url(qr_code_id: int, base_url: str) -> str:
    """Public URL that the QR image encodes."""
    return urljoin(base_url, f'/qrcodes/{qr_code_id}/scan')


def get_qr_code_image(qr_code_id: int, base_url: str) -> str:
    """
    Render the scan URL of a QR code as a PNG data URI.

    Args:
        qr_code_id: QRCode primary key
        base_url: Public origin of the app (settings.APP_URL)

    Returns:
        'data:image/png;base64,...' string usable as <img src>
    """
    qr = qrcode.QRCode(
        version=QR_VERSION,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=QR_BOX_SIZE,
        border=QR_BORDER,
    )
    qr.add_data(get_scan_url(qr_code_id, base_url))
    qr.make(fit=True)

    img = qr.make_image(fill_color='black', back_color='white')

    buffer = BytesIO()
    img.save(buffer, format=QR_IMAGE_FORMAT)
    encoded = base64.b64encode(buffer.getvalue()).decode()
    return f'data:image/png;base64,{encoded}'
