"""Window icon drawn with Pillow."""

from PIL import Image, ImageDraw


def create_icon(size: int = 64) -> Image.Image:
    """Draw an IR remote with signal arcs.

    Args:
        size: Icon size in pixels

    Returns:
        A square RGBA image
    """
    image = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(image)

    bg_color = (41, 128, 185, 255)
    accent_color = (231, 76, 60, 255)
    white = (255, 255, 255, 255)

    # Circular background
    padding = size // 16
    draw.ellipse([padding, padding, size - padding, size - padding], fill=bg_color)

    # Remote body
    body_width = int(size * 0.26)
    body_left = size // 2 - body_width // 2
    body_top = int(size * 0.38)
    body_bottom = int(size * 0.84)
    draw.rounded_rectangle(
        [body_left, body_top, body_left + body_width, body_bottom],
        radius=max(1, size // 16),
        fill=white,
    )

    # IR emitter at the top of the remote
    emitter = max(1, size // 20)
    cx = size // 2
    cy = body_top + emitter * 2
    draw.ellipse([cx - emitter, cy - emitter, cx + emitter, cy + emitter], fill=accent_color)

    # Buttons
    button = max(1, size // 28)
    for row in range(3):
        y = cy + emitter * 3 + row * button * 4
        for x in (cx - button * 2, cx + button * 2):
            draw.ellipse([x - button, y - button, x + button, y + button], fill=bg_color)

    # Signal arcs above the emitter
    line_width = max(1, size // 24)
    waves = 2 if size < 48 else 3
    for i in range(waves):
        radius = int(size * (0.08 + i * 0.07))
        bbox = [cx - radius, cy - radius, cx + radius, cy + radius]
        draw.arc(bbox, 225, 315, fill=accent_color, width=line_width)

    return image
