"""
Pytest fixtures for create_thumbnail tests.

Image files are generated with Pillow in a temporary directory rather than
checked in.
"""

import pytest
from PIL import Image


def _save_animation(path, colors, size, **kwargs):
    frames = [Image.new('RGB', size, color=color) for color in colors]
    frames[0].save(
        path,
        save_all=True,
        append_images=frames[1:],
        duration=100,
        loop=0,
        **kwargs
    )
    return path


@pytest.fixture
def images_dir(tmp_path):
    """Directory holding the source images."""
    path = tmp_path / 'images'
    path.mkdir()
    return path


@pytest.fixture
def out_dir(tmp_path):
    """Directory for thumbnails; not created up front."""
    return tmp_path / 'thumbnails'


@pytest.fixture
def red_png(images_dir):
    """A 100x200 PNG."""
    path = images_dir / 'red.png'
    Image.new('RGB', (100, 200), color='red').save(path)
    return path


@pytest.fixture
def noise_jpg(images_dir):
    """A 100x200 JPEG."""
    path = images_dir / 'noise.jpg'
    Image.effect_noise((100, 200), 64).convert('RGB').save(path, quality=90)
    return path


@pytest.fixture
def rotated_jpg(images_dir):
    """A JPEG stored as 100x50 whose EXIF orientation turns it into 50x100."""
    path = images_dir / 'rotated.jpg'
    exif = Image.Exif()
    exif[0x0112] = 6
    Image.new('RGB', (100, 50), color='orange').save(path, exif=exif)
    return path


@pytest.fixture
def transparent_png(images_dir):
    """A 64x64 palette PNG with a transparent colour."""
    path = images_dir / 'transparent.png'
    img = Image.new('P', (64, 64), color=0)
    img.putpalette([0, 128, 255, 255, 0, 0])
    img.save(path, transparency=0)
    return path


@pytest.fixture
def green_tiff(images_dir):
    """A 50x50 TIFF."""
    path = images_dir / 'green.tiff'
    Image.new('RGB', (50, 50), color='green').save(path)
    return path


@pytest.fixture
def static_gif(images_dir):
    """A single-frame 64x32 GIF."""
    path = images_dir / 'yellow.gif'
    Image.new('RGB', (64, 32), color='yellow').save(path)
    return path


@pytest.fixture
def animated_gif(images_dir):
    """A three-frame 30x20 GIF."""
    return _save_animation(images_dir / 'animated_squares.gif', ['red', 'green', 'blue'], (30, 20))


@pytest.fixture
def two_frame_gif(images_dir):
    """A GIF with exactly two frames."""
    return _save_animation(images_dir / 'two_frames.gif', ['red', 'blue'], (16, 16))


@pytest.fixture
def static_webp(images_dir):
    """A single-frame 50x50 WebP."""
    path = images_dir / 'purple.webp'
    Image.new('RGB', (50, 50), color='purple').save(path, format='WEBP')
    return path


@pytest.fixture
def animated_webp(images_dir):
    """A three-frame 30x20 WebP."""
    return _save_animation(
        images_dir / 'animated_squares.webp',
        ['red', 'green', 'blue'],
        (30, 20),
        format='WEBP',
    )


@pytest.fixture
def malformed_gif(images_dir):
    """Text saved with a .gif extension."""
    path = images_dir / 'malformed.txt.gif'
    path.write_text('this is not really a GIF\n')
    return path


@pytest.fixture
def malformed_webp(images_dir):
    """Text saved with a .webp extension."""
    path = images_dir / 'malformed.txt.webp'
    path.write_text('this is not really a WebP\n')
    return path


def _truncations(source, step=1):
    """Write copies of ``source`` cut short at every ``step`` bytes."""
    data = source.read_bytes()
    paths = []
    for cut in range(1, len(data), step):
        path = source.with_name(f'{source.stem}_cut{cut}{source.suffix}')
        path.write_bytes(data[:cut])
        paths.append(path)
    return paths


@pytest.fixture
def truncated_gifs(tmp_path):
    """A three-frame 64x64 GIF cut short at every byte."""
    cut_dir = tmp_path / 'truncated'
    cut_dir.mkdir()
    source = _save_animation(cut_dir / 'loop.gif', ['red', 'green', 'blue'], (64, 64))
    return _truncations(source)


@pytest.fixture
def truncated_webps(tmp_path):
    """A three-frame 64x64 WebP cut short every few bytes."""
    cut_dir = tmp_path / 'truncated'
    cut_dir.mkdir()
    source = _save_animation(cut_dir / 'loop.webp', ['red', 'green', 'blue'], (64, 64), format='WEBP')
    return _truncations(source, step=3)


@pytest.fixture
def gif_cut_in_second_frame(images_dir):
    """A GIF whose data stops halfway through the second frame's image descriptor."""
    data = _save_animation(images_dir / 'whole.gif', ['red', 'green', 'blue'], (64, 64)).read_bytes()
    graphic_control = b'\x21\xf9\x04'
    first = data.index(graphic_control)
    second = data.index(graphic_control, first + 1)
    # 8-byte graphic control block, then 5 of the descriptor's 10 bytes
    path = images_dir / 'cut_in_second_frame.gif'
    path.write_bytes(data[:second + 8 + 5])
    return path


@pytest.fixture
def png_named_gif(images_dir):
    """A real PNG saved under a .gif name."""
    path = images_dir / 'actually_png.gif'
    Image.new('RGB', (10, 10), color='red').save(path, format='PNG')
    return path


@pytest.fixture
def text_file(images_dir):
    """A file that is not an image at all."""
    path = images_dir / 'notes.txt'
    path.write_text('name = "create_thumbnail"\n')
    return path


@pytest.fixture
def logger():
    """Fixture providing a logger."""
    import logging
    return logging.getLogger('test')
