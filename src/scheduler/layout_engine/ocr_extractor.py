"""OCR extraction using PaddleOCR."""

from pathlib import Path
from typing import List, Optional, Sequence, Union

import cv2
import numpy as np

from .errors import OCRError
from .logging import get_logger
from .models import TextBox

log = get_logger(__name__)


def polygon_to_box(text: str, poly: Sequence) -> Optional[TextBox]:
    """
    Convert an OCR polygon into a top-left/width/height box.

    Accepts either four [x, y] points or a flat [x1, y1, x2, y2] rectangle.
    Negative sizes from skewed polygons are clamped to 0.

    Returns:
        TextBox or None when the polygon is unusable
    """
    try:
        points = [(float(p[0]), float(p[1])) for p in poly]
    except (TypeError, IndexError):
        try:
            x1, y1, x2, y2 = map(float, poly)
        except (TypeError, ValueError):
            return None
        points = [(x1, y1), (x2, y1), (x2, y2), (x1, y2)]

    if len(points) < 4:
        return None

    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    x, y = min(xs), min(ys)
    return TextBox(
        text=text,
        x=x,
        y=y,
        width=max(max(xs) - x, 0.0),
        height=max(max(ys) - y, 0.0),
    )


class OCRExtractor:
    """Handles OCR extraction from schedule screenshots using PaddleOCR."""

    def __init__(self, use_gpu: bool = False, lang: str = 'en', engine=None):
        """
        Initialize OCR extractor.

        Args:
            use_gpu: Whether to use GPU acceleration (note: gpu support requires paddlepaddle-gpu)
            lang: Language code for OCR (default: 'en')
            engine: Pre-built object with an ``ocr(image)`` method; built from
                PaddleOCR when omitted
        """
        self.use_gpu = use_gpu
        if engine is None:
            # Loading paddleocr pulls in the paddle runtime
            from paddleocr import PaddleOCR
            engine = PaddleOCR(
                use_angle_cls=True,  # Enable angle classification for rotated text
                lang=lang,
                det_db_box_thresh=0.3,  # Lower threshold for better detection of faint text
                det_db_unclip_ratio=2.0,  # Expand detected boxes slightly
            )
        self.ocr = engine

    def extract_boxes_from_path(self, file_path: Union[str, Path]) -> List[TextBox]:
        """Read an image file and extract its text boxes."""
        return self.extract_boxes(Path(file_path).read_bytes())

    def extract_boxes(self, image_bytes: bytes) -> List[TextBox]:
        """
        Extract text boxes from encoded image bytes (PNG, JPEG, ...).

        Args:
            image_bytes: Raw image file content

        Returns:
            Text boxes sorted top to bottom, then left to right

        Raises:
            OCRError: If the image cannot be decoded or OCR fails
        """
        buffer = np.frombuffer(image_bytes, dtype=np.uint8)
        image = cv2.imdecode(buffer, cv2.IMREAD_COLOR) if buffer.size else None
        if image is None:
            raise OCRError("Failed to decode image")

        return self.extract_text(image)

    def extract_text(self, image: np.ndarray) -> List[TextBox]:
        """
        Extract text boxes from an image array.

        Args:
            image: Input image as numpy array (BGR format from OpenCV)

        Returns:
            Text boxes sorted top to bottom, then left to right

        Raises:
            OCRError: If the OCR engine fails
        """
        if image is None or not isinstance(image, np.ndarray) or image.size == 0:
            log.warning("ocr_empty_image")
            return []

        try:
            result = self.ocr.ocr(image)
        except Exception as e:
            raise OCRError(f"Failed to extract text from image: {e}") from e

        if not result or result[0] is None:
            log.warning("ocr_no_results")
            return []

        boxes: List[TextBox] = []

        # PaddleOCR has had API changes: older versions return a list of
        # (bbox, (text, confidence)) tuples. Newer pipeline returns a single
        # dict inside a list with keys like 'rec_texts', 'rec_polys' or
        # 'rec_boxes'. Handle both.
        first = result[0]

        if isinstance(first, dict) and 'rec_texts' in first:
            rec_texts = first.get('rec_texts', [])
            rec_polys = first.get('rec_polys')
            if rec_polys is None:
                rec_polys = first.get('rec_boxes')

            for idx, text in enumerate(rec_texts):
                text = str(text).strip()
                if not text:
                    continue
                if rec_polys is None or idx >= len(rec_polys):
                    log.warning("ocr_item_without_polygon", text=text)
                    continue
                box = polygon_to_box(text, rec_polys[idx])
                if box is not None:
                    boxes.append(box)
        else:
            for line in first if isinstance(first, list) else result:
                if not line or len(line) < 2:
                    continue

                bbox, text_info = line[0], line[1]
                if not text_info:
                    continue

                text = str(text_info[0]).strip() if text_info[0] else ""
                if not text:
                    continue

                box = polygon_to_box(text, bbox)
                if box is None:
                    log.warning("ocr_malformed_result", text=text)
                    continue
                boxes.append(box)

        boxes.sort(key=lambda b: (b.center_y, b.center_x))
        log.debug("ocr_extracted", boxes=len(boxes))
        return boxes
