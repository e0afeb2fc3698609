"""QR codes pointing attendees at an event's check-in page."""
import io

import qrcode
from qrcode.image.svg import SvgPathImage


def build_checkin_url(base_url: str, event_id: str) -> str:
    """Check-in page URL for an event, e.g. ``https://host/checkin/<id>``."""
    return f"{base_url.rstrip('/')}/checkin/{event_id}"


def generate_qr_code(data: str) -> bytes:
    """Generate a QR code for ``data`` as an SVG document.

    Args:
        data: The data to encode in the QR code

    Returns:
        bytes: The SVG image
    """
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=10,
        border=2,
    )
    qr.add_data(data)
    qr.make(fit=True)

    img = qr.make_image(image_factory=SvgPathImage)
    buffer = io.BytesIO()
    img.save(buffer)
    return buffer.getvalue()
