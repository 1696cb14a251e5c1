"""
Typed ZPL fragment records and the text rendering pass.

Emitters build a flat list of these records; render_program() turns the
list into program text in one pass. Keeping the records typed lets tests
inspect what was emitted without matching strings.
"""

# Standard Library
import dataclasses
import re
import string

# local repo modules
import zpl_label_compiler as zlc
import zpl_label_compiler.config


ENVELOPE_OPEN = zlc.config.ENVELOPE_OPEN
ENVELOPE_CLOSE = zlc.config.ENVELOPE_CLOSE
ENCODING_UTF8 = zlc.config.ENCODING_UTF8
HEX_INDICATOR = zlc.config.HEX_INDICATOR
BARCODE_MODULE_WIDTH = zlc.config.BARCODE_MODULE_WIDTH
BARCODE_WIDE_RATIO = zlc.config.BARCODE_WIDE_RATIO
BARCODE_DEFAULT_HEIGHT = zlc.config.BARCODE_DEFAULT_HEIGHT
QR_MODEL = zlc.config.QR_MODEL
QR_MAGNIFICATION = zlc.config.QR_MAGNIFICATION
QR_ERROR_CORRECTION = zlc.config.QR_ERROR_CORRECTION
QR_MASK = zlc.config.QR_MASK
FONT_VARIANT_PATTERN = re.compile(zlc.config.FONT_VARIANT_PATTERN)


@dataclasses.dataclass(frozen=True)
class EnvelopeOpen:
	def render(self) -> list[str]:
		return [ENVELOPE_OPEN]


@dataclasses.dataclass(frozen=True)
class EnvelopeClose:
	def render(self) -> list[str]:
		return [ENVELOPE_CLOSE]


@dataclasses.dataclass(frozen=True)
class EncodingDirective:
	charset: int = ENCODING_UTF8

	def render(self) -> list[str]:
		return [f"^CI{self.charset}"]


@dataclasses.dataclass(frozen=True)
class FieldOrigin:
	x: int
	y: int

	def render(self) -> list[str]:
		return [f"^FO{self.x},{self.y}"]


@dataclasses.dataclass(frozen=True)
class FontSelection:
	variant: str
	height: int
	width: int

	def __post_init__(self) -> None:
		check_font_variant(self.variant)

	def render(self) -> list[str]:
		return [f"^{self.variant},{self.height},{self.width}"]


@dataclasses.dataclass(frozen=True)
class FieldData:
	payload: str
	prefix: str = ""

	def render(self) -> list[str]:
		if needs_hex_escape(self.payload):
			return [f"^FH{HEX_INDICATOR}", f"^FD{self.prefix}{hex_escape(self.payload)}^FS"]
		return [f"^FD{self.prefix}{self.payload}^FS"]


@dataclasses.dataclass(frozen=True)
class BarcodeDefaults:
	module_width: int = BARCODE_MODULE_WIDTH
	wide_ratio: int = BARCODE_WIDE_RATIO
	height: int = BARCODE_DEFAULT_HEIGHT

	def render(self) -> list[str]:
		return [f"^BY{self.module_width},{self.wide_ratio},{self.height}"]


@dataclasses.dataclass(frozen=True)
class Code128:
	height: int
	orientation: str = "N"
	interpretation_line: bool = True
	interpretation_above: bool = False
	check_digit: bool = False
	mode: str = "A"

	def render(self) -> list[str]:
		flags = [yes_no(self.interpretation_line), yes_no(self.interpretation_above), yes_no(self.check_digit)]
		return [f"^BC{self.orientation},{self.height},{','.join(flags)},{self.mode}"]


@dataclasses.dataclass(frozen=True)
class QRCode:
	orientation: str = "N"
	model: int = QR_MODEL
	magnification: int = QR_MAGNIFICATION
	error_correction: str = QR_ERROR_CORRECTION
	mask: int = QR_MASK

	def render(self) -> list[str]:
		return [
			f"^BQ{self.orientation},{self.model},{self.magnification},"
			f"{self.error_correction},{self.mask}"
		]


@dataclasses.dataclass(frozen=True)
class GraphicBox:
	width: int
	height: int
	thickness: int

	def render(self) -> list[str]:
		return [f"^GB{self.width},{self.height},{self.thickness}^FS"]


@dataclasses.dataclass(frozen=True)
class Separator:
	def render(self) -> list[str]:
		return [""]


#============================================
def yes_no(flag: bool) -> str:
	return "Y" if flag else "N"


#============================================
def check_font_variant(variant: str) -> str:
	"""
	Validate a font selector such as A0N.

	Args:
		variant: Font name and orientation.

	Returns:
		The same variant.
	"""
	if not isinstance(variant, str) or not FONT_VARIANT_PATTERN.fullmatch(variant):
		raise ValueError(f"Invalid font variant: {variant!r}")
	return variant


#============================================
def needs_hex_escape(payload: str) -> bool:
	"""
	Check whether field data holds characters ZPL would interpret.

	Args:
		payload: Field data text.

	Returns:
		True if the payload needs ^FH escaping.
	"""
	for char in payload:
		if char in "^~" or ord(char) < 0x20 or ord(char) == 0x7F:
			return True
	return False


#============================================
def hex_escape(payload: str) -> str:
	"""
	Escape field data for use after ^FH.

	The hex indicator itself, the format and control prefixes, and ASCII
	control characters become _XX escapes. Everything else passes through.

	Args:
		payload: Field data text.

	Returns:
		Escaped text.
	"""
	result: list[str] = []
	for char in payload:
		if char in "^~" or char == HEX_INDICATOR or ord(char) < 0x20 or ord(char) == 0x7F:
			result.append(f"{HEX_INDICATOR}{ord(char):02X}")
		else:
			result.append(char)
	return "".join(result)


#============================================
def hex_unescape(escaped: str) -> str:
	"""
	Reverse hex_escape().

	An indicator not followed by two hex digits is kept as a literal.

	Args:
		escaped: Field data written after ^FH.

	Returns:
		Original text.
	"""
	result: list[str] = []
	index = 0
	while index < len(escaped):
		char = escaped[index]
		digits = escaped[index + 1:index + 3]
		if char == HEX_INDICATOR and len(digits) == 2 and all(c in string.hexdigits for c in digits):
			result.append(chr(int(digits, 16)))
			index += 3
			continue
		result.append(char)
		index += 1
	return "".join(result)


#============================================
def render_program(fragments: list) -> str:
	"""
	Render fragment records to program text.

	Args:
		fragments: Ordered fragment records.

	Returns:
		Program text joined with newlines.
	"""
	lines: list[str] = []
	for fragment in fragments:
		lines.extend(fragment.render())
	return "\n".join(lines)


#============================================
def wrap_program(body: list) -> list:
	"""
	Wrap body fragments in the envelope and encoding directive.

	Args:
		body: Element fragment records.

	Returns:
		Complete fragment list.
	"""
	return [EnvelopeOpen(), EncodingDirective()] + list(body) + [EnvelopeClose()]
