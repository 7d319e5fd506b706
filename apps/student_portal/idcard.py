# student_portal/idcard.py
import os
from io import BytesIO

from django.conf import settings
from django.http import HttpResponse
from django.utils.encoding import force_str
from PIL import Image, ImageColor, ImageDraw, ImageFont

from utils.utils import qr_image


class StudentIDCardGenerator:
    """
    Draws the printable student ID card: institution header, avatar,
    name and program, a details block and the verification QR code.
    """

    WIDTH, HEIGHT = 600, 900
    MARGIN = 10

    DEFAULT_COLORS = {
        'background_start': '#1E40AF',
        'background_end': '#1E3A8A',
        'primary': '#3B82F6',
        'primary_accent': '#2563EB',
        'secondary': '#FACC15',
        'text_light': '#FFFFFF',
        'text_dark': '#1E293B',
        'text_muted': '#DBEAFE',
    }

    FONT_SIZES = {
        'org_name': 26,
        'title': 16,
        'name': 36,
        'program': 22,
        'details_label': 18,
        'details_value': 20,
        'footer': 14,
    }

    def __init__(self, profile, payload):
        self.profile = profile
        self.payload = payload
        self.institution = profile.institution
        self.colors = self._get_color_config()
        self._load_fonts()

    def _get_color_config(self):
        colors = {**self.DEFAULT_COLORS, **getattr(settings, 'ID_CARD_COLORS', {})}
        if self.institution is not None:
            colors['background_start'] = self.institution.primary_color or colors['background_start']
            colors['primary'] = self.institution.secondary_color or colors['primary']
        return colors

    def _load_fonts(self):
        self.fonts = {key: ImageFont.load_default(size=size) for key, size in self.FONT_SIZES.items()}

    def _create_canvas(self):
        img = Image.new('RGB', (self.WIDTH, self.HEIGHT))
        draw = ImageDraw.Draw(img)

        start_color = ImageColor.getrgb(self.colors['background_start'])
        end_color = ImageColor.getrgb(self.colors['background_end'])
        for y in range(self.HEIGHT):
            color = tuple(
                int(start + (end - start) * y / self.HEIGHT)
                for start, end in zip(start_color, end_color)
            )
            draw.line([(0, y), (self.WIDTH, y)], fill=color)

        draw.polygon([(0, 0), (self.WIDTH, 0), (self.WIDTH, 160), (0, 220)], fill=self.colors['primary_accent'])
        draw.polygon([(0, 0), (self.WIDTH, 0), (self.WIDTH, 120), (0, 180)], fill=self.colors['primary'])
        return img, draw

    def _draw_header(self, draw, base_img):
        y_cursor = 35
        logo = getattr(self.institution, 'logo', None)
        if logo and hasattr(logo, 'path') and os.path.exists(logo.path):
            logo_img = Image.open(logo.path).convert("RGBA")
            logo_img.thumbnail((80, 80), Image.LANCZOS)
            base_img.paste(logo_img, ((self.WIDTH - logo_img.width) // 2, y_cursor), logo_img)
            y_cursor += logo_img.height + 15
        else:
            y_cursor += 20

        institution_name = self.institution.display_name if self.institution else 'MyScholr'
        draw.text((self.WIDTH / 2, y_cursor), institution_name.upper(),
                  font=self.fonts['org_name'], fill=self.colors['text_light'], anchor='mm')
        y_cursor += 32
        draw.text((self.WIDTH / 2, y_cursor), "STUDENT IDENTITY CARD",
                  font=self.fonts['title'], fill=self.colors['text_muted'], anchor='mm')
        return y_cursor + 45

    def _draw_photo(self, draw, base_img, y_pos):
        """Circular avatar, or the student's initials when there is no avatar."""
        size = 160
        x = self.WIDTH // 2 - size // 2

        draw.ellipse((x - 5, y_pos - 5, x + size + 5, y_pos + size + 5), fill=self.colors['text_light'])

        avatar = self.profile.avatar
        if avatar and hasattr(avatar, 'path') and os.path.exists(avatar.path):
            photo = Image.open(avatar.path).convert("RGBA").resize((size, size), Image.LANCZOS)
            mask = Image.new('L', (size, size), 0)
            ImageDraw.Draw(mask).ellipse((0, 0, size, size), fill=255)
            base_img.paste(photo, (x, y_pos), mask)
        else:
            draw.ellipse((x, y_pos, x + size, y_pos + size), fill=self.colors['text_muted'])
            draw.text((x + size / 2, y_pos + size / 2), self.profile.initials,
                      font=self.fonts['name'], fill=self.colors['text_dark'], anchor='mm')
        return y_pos + size + 35

    def _draw_identity(self, draw, y_start):
        name = self.profile.full_name or self.profile.user.email
        draw.text((self.WIDTH / 2, y_start), name.upper(),
                  font=self.fonts['name'], fill=self.colors['text_light'], anchor='mm')
        y_cursor = y_start + 40
        if self.profile.program:
            draw.text((self.WIDTH / 2, y_cursor), self.profile.program,
                      font=self.fonts['program'], fill=self.colors['secondary'], anchor='mm')
        return y_cursor + 45

    def _draw_details(self, draw, y_start):
        details = [
            ('Student ID', self.profile.display_id),
            ('Email', self.profile.email),
            ('Major', self.profile.major or 'N/A'),
            ('Year', self.profile.year_of_study or 'N/A'),
            ('Phone', self.profile.phone or 'N/A'),
        ]
        for i, (label, value) in enumerate(details):
            y = y_start + i * 42
            draw.text((60, y), f"{label}:", font=self.fonts['details_label'],
                      fill=self.colors['text_muted'], anchor='lm')
            draw.text((200, y), force_str(value), font=self.fonts['details_value'],
                      fill=self.colors['text_light'], anchor='lm')

    def _draw_footer(self, draw, base_img):
        qr_size = 140
        qr = qr_image(self.payload, size=4, border=2).resize((qr_size, qr_size))

        qr_x = (self.WIDTH - qr_size) // 2
        qr_y = self.HEIGHT - qr_size - 60
        draw.rounded_rectangle(
            (qr_x - 8, qr_y - 8, qr_x + qr_size + 8, qr_y + qr_size + 8),
            radius=10,
            fill=self.colors['text_light'],
        )
        base_img.paste(qr, (qr_x, qr_y))
        draw.text((self.WIDTH / 2, self.HEIGHT - 30), "Scan to verify",
                  font=self.fonts['footer'], fill=self.colors['text_muted'], anchor='mm')

    def generate_id_card(self):
        base_img, draw = self._create_canvas()

        y_cursor = self._draw_header(draw, base_img)
        y_cursor = self._draw_photo(draw, base_img, y_cursor)
        y_cursor = self._draw_identity(draw, y_cursor)
        self._draw_details(draw, y_cursor)
        self._draw_footer(draw, base_img)

        img_buffer = BytesIO()
        base_img.save(img_buffer, format='PNG', dpi=(300, 300))
        img_buffer.seek(0)
        return img_buffer

    def get_id_card_response(self):
        img_buffer = self.generate_id_card()
        response = HttpResponse(img_buffer.getvalue(), content_type='image/png')
        safe_id = "".join(c for c in str(self.profile.display_id) if c.isalnum())
        response['Content-Disposition'] = f'attachment; filename="{safe_id}_student_id_card.png"'
        return response
