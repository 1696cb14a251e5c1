"""
Shared configuration and constants.
"""

import dataclasses


POINTS_PER_INCH = 72.0
PIXEL_TO_DOT_SCALE = 2.0

ENVELOPE_OPEN = "^XA"
ENVELOPE_CLOSE = "^XZ"
ENCODING_UTF8 = 28
HEX_INDICATOR = "_"

ELEMENT_TYPES = ("text", "barcode", "qrcode", "box", "line")
DEFAULT_ELEMENT_X = 50
DEFAULT_ELEMENT_Y = 50
DEFAULT_FONT_VARIANT = "A0N"
# font name plus orientation (N, R, I, B), as written after the caret
FONT_VARIANT_PATTERN = r"[A-Z0-9][0-9A-Z]?[NRIB]"
DEFAULT_TEXT_FONT_SIZE = 25
DEFAULT_FONT_SIZE = 20
DEFAULT_ELEMENT_SIZES = {
	"text": (200, 30),
	"barcode": (300, 60),
	"qrcode": (100, 100),
	"box": (200, 100),
	"line": (200, 100),
}
DEFAULT_ELEMENT_CONTENT = {
	"text": "New text",
	"barcode": "1234567890",
	"qrcode": "https://example.com",
	"box": "",
	"line": "",
}

BARCODE_MODULE_WIDTH = 2
BARCODE_WIDE_RATIO = 2
BARCODE_DEFAULT_HEIGHT = 50
QR_MODEL = 2
QR_MAGNIFICATION = 4
QR_ERROR_CORRECTION = "H"
QR_MASK = 7
QR_DATA_PREFIX = "QA,"
BOX_THICKNESS = 3
LINE_HEIGHT = 2
LINE_THICKNESS = 2

COMMENT_PREFIXES = ("//",)

DEVICE_RESOLUTIONS = {
	"6dpmm": 152,
	"8dpmm": 203,
	"12dpmm": 300,
	"24dpmm": 600,
}
# size class -> (canvas width px, canvas height px, width in, height in)
LABEL_SIZES = {
	"4x6": (600, 400, 4.0, 6.0),
	"3x2": (450, 300, 3.0, 2.0),
	"2x1": (300, 150, 2.0, 1.0),
}
DEFAULT_RESOLUTION = "8dpmm"
DEFAULT_LABEL_SIZE = "4x6"

PREVIEW_BASE_URL = "http://api.labelary.com/v1"
PREVIEW_TIMEOUT = 15.0
PREVIEW_ACCEPT = "image/png"


@dataclasses.dataclass(frozen=True)
class ResolutionProfile:
	device_resolution: str = DEFAULT_RESOLUTION
	physical_size: str = DEFAULT_LABEL_SIZE

	def __post_init__(self) -> None:
		if self.device_resolution not in DEVICE_RESOLUTIONS:
			raise ValueError(f"Unknown device resolution: {self.device_resolution}")
		if self.physical_size not in LABEL_SIZES:
			raise ValueError(f"Unknown label size: {self.physical_size}")

	@property
	def canvas_size(self) -> tuple[int, int]:
		width, height, _width_in, _height_in = LABEL_SIZES[self.physical_size]
		return (width, height)

	@property
	def dpi(self) -> int:
		return DEVICE_RESOLUTIONS[self.device_resolution]


#============================================
def inches_to_points(value: float) -> float:
	"""
	Convert inches to points.

	Args:
		value: Inches value.

	Returns:
		Points value.
	"""
	return value * POINTS_PER_INCH


#============================================
def label_size_points(physical_size: str) -> tuple[float, float]:
	"""
	Get the physical page size of a label size class.

	Args:
		physical_size: Size class such as "4x6".

	Returns:
		Tuple of (width, height) in points.
	"""
	if physical_size not in LABEL_SIZES:
		raise ValueError(f"Unknown label size: {physical_size}")
	_width, _height, width_in, height_in = LABEL_SIZES[physical_size]
	return (inches_to_points(width_in), inches_to_points(height_in))
