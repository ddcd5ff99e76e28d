"""UPI payment requests: deep link plus a scannable QR image.

The link follows the ``upi://pay`` scheme understood by Indian payment apps.
The QR code is returned as a PNG data URL so clients can drop it straight into
an ``<img>`` tag.
"""

import base64
import io
from urllib.parse import quote

import qrcode


def build_payment_link(upi_id: str, payee_name: str, amount: float, reference: str) -> str:
    """Build a ``upi://pay`` link for ``amount`` rupees, tagged with ``reference``."""
    return (
        f"upi://pay?pa={upi_id}"
        f"&pn={quote(payee_name or '', safe='')}"
        f"&am={format_amount(amount)}"
        f"&cu=INR"
        f"&tn={quote(reference, safe='')}"
    )


def format_amount(amount: float) -> str:
    # Whole rupees render without decimals, everything else with two places
    if float(amount).is_integer():
        return str(int(amount))
    return f"{amount:.2f}"


def render_qr_data_url(payload: str) -> str:
    """Render ``payload`` as a QR code and return it as a base64 PNG data URL."""
    qr = qrcode.QRCode(border=2)
    qr.add_data(payload)
    qr.make(fit=True)
    image = qr.make_image()

    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    encoded = base64.b64encode(buffer.getvalue()).decode("ascii")
    return f"data:image/png;base64,{encoded}"
