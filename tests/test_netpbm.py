import io

import numpy as np
import pytest
from PIL import Image

from pnmtext import NetPBMDecoder
from pnmtext.utils import to_array

SAMPLES = [
    "P1\n4 3\n0 1 1 0\n1 0 0 1\n0 1 1 0\n",
    "P2\n3 2\n255\n0 64 128\n192 250 255\n",
    "P3\n2 2\n255\n255 0 0  0 255 0\n0 0 255  12 34 56\n",
]


@pytest.mark.parametrize("text", SAMPLES)
def test_matches_pillow(text):
    """Verify our decoder agrees with Pillow's plain PNM reader."""
    reference = np.array(Image.open(io.BytesIO(text.encode("ascii"))).convert("RGBA"))

    decoded = to_array(NetPBMDecoder.decode(text))
    assert np.array_equal(reference, decoded), "Decoded data mismatch!"
