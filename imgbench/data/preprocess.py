from __future__ import annotations
import numpy as np
from PIL import Image

IMAGENET_MEAN = (0.485, 0.456, 0.406)
IMAGENET_STD = (0.229, 0.224, 0.225)

def load_rgb(image_path: str) -> Image.Image:
    # decode errors (UnidentifiedImageError/OSError) propagate to the caller
    with Image.open(image_path) as img:
        return img.convert('RGB')

def normalize(rgb: np.ndarray, mean=IMAGENET_MEAN, std=IMAGENET_STD) -> np.ndarray:
    """(H, W, 3) uint8 -> (1, 3, H, W) float32, per-channel (v/255 - mean) / std.

    Arithmetic stays in float32 throughout so the values match a float32
    reference transform bit for bit.
    """
    mean = np.asarray(mean, dtype=np.float32).reshape(3, 1, 1)
    std = np.asarray(std, dtype=np.float32).reshape(3, 1, 1)
    chw = np.transpose(rgb, (2, 0, 1)).astype(np.float32)  # (3, H, W), [c, y, x] = pixel at column x, row y
    x = (chw / np.float32(255.0) - mean) / std
    return np.ascontiguousarray(x[None, ...], dtype=np.float32)

def preprocess_image(image_path: str, img_size: int = 224, mean=IMAGENET_MEAN, std=IMAGENET_STD) -> np.ndarray:
    """Decodes an image file into a normalized (1, 3, img_size, img_size) tensor.

    - direct resize to a square with the triangle (bilinear) filter; no
      aspect-ratio preservation, no cropping
    - channel order R, G, B; channel-first layout
    """
    img = load_rgb(image_path)
    resized = img.resize((img_size, img_size), resample=Image.Resampling.BILINEAR)
    rgb = np.asarray(resized, dtype=np.uint8)
    return normalize(rgb, mean, std)
