import base64
import io
import json

import qrcode
from django.conf import settings
from django.core.serializers.json import DjangoJSONEncoder


def _qr_colors(dark=None, light=None):
    colors = getattr(settings, 'ID_CARD_COLORS', {})
    return dark or colors.get('qr_dark', '#000000'), light or colors.get('qr_light', '#FFFFFF')


def qr_image(data, size=8, border=2, dark=None, light=None):
    """
    Build a QR code PIL image. Dicts are encoded as JSON so scanners get a
    machine-readable payload.
    """
    if isinstance(data, dict):
        data_str = json.dumps(data, cls=DjangoJSONEncoder)
    else:
        data_str = str(data)

    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=size,
        border=border,
    )
    qr.add_data(data_str)
    qr.make(fit=True)

    fill, back = _qr_colors(dark, light)
    return qr.make_image(fill_color=fill, back_color=back).convert('RGB')


def qr_png_bytes(data, **kwargs):
    buffered = io.BytesIO()
    qr_image(data, **kwargs).save(buffered, format="PNG")
    return buffered.getvalue()


def generate_qr_code_base64(data, **kwargs):
    """
    Generate QR code and return as a base64 PNG data URI
    """
    qr_base64 = base64.b64encode(qr_png_bytes(data, **kwargs)).decode()
    return f"data:image/png;base64,{qr_base64}"
