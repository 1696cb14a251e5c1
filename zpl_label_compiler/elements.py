"""
Label element model and document mutation.
"""

# Standard Library
import dataclasses
import itertools
import json
import math
import pathlib

# local repo modules
import zpl_label_compiler as zlc
import zpl_label_compiler.config
import zpl_label_compiler.fragments


ResolutionProfile = zlc.config.ResolutionProfile

ELEMENT_TYPES = zlc.config.ELEMENT_TYPES
DEFAULT_ELEMENT_X = zlc.config.DEFAULT_ELEMENT_X
DEFAULT_ELEMENT_Y = zlc.config.DEFAULT_ELEMENT_Y
DEFAULT_ELEMENT_SIZES = zlc.config.DEFAULT_ELEMENT_SIZES
DEFAULT_ELEMENT_CONTENT = zlc.config.DEFAULT_ELEMENT_CONTENT
DEFAULT_FONT_VARIANT = zlc.config.DEFAULT_FONT_VARIANT
DEFAULT_TEXT_FONT_SIZE = zlc.config.DEFAULT_TEXT_FONT_SIZE
DEFAULT_FONT_SIZE = zlc.config.DEFAULT_FONT_SIZE

INT_FIELDS = ("x", "y", "width", "height", "font_size")
UPDATABLE_FIELDS = ("type", "content", "font_variant") + INT_FIELDS


@dataclasses.dataclass
class LabelElement:
	id: int
	type: str
	x: int = 0
	y: int = 0
	width: int = 0
	height: int = 0
	content: str = ""
	font_size: int = DEFAULT_FONT_SIZE
	font_variant: str = DEFAULT_FONT_VARIANT


#============================================
def check_element_type(element_type: str) -> str:
	"""
	Validate an element type name.

	Args:
		element_type: Type name.

	Returns:
		The same type name.
	"""
	if element_type not in ELEMENT_TYPES:
		raise ValueError(f"Unknown element type: {element_type}")
	return element_type


#============================================
def coerce_non_negative(value) -> int:
	"""
	Coerce a numeric field to a non-negative int.

	Args:
		value: Number or numeric string. None, empty, unparsable or
			non-finite input becomes 0.

	Returns:
		Non-negative int.
	"""
	if value is None:
		return 0
	if isinstance(value, str):
		value = value.strip()
		try:
			value = float(value) if value else 0
		except ValueError:
			value = 0
	try:
		value = float(value)
	except (TypeError, ValueError):
		return 0
	# nan, inf and overflowing literals such as 1e400
	if not math.isfinite(value):
		return 0
	return max(0, int(value))


#============================================
def build_default_element(element_id: int, element_type: str) -> LabelElement:
	"""
	Build an element with the per-type defaults.

	Args:
		element_id: Identifier to assign.
		element_type: Element type name.

	Returns:
		LabelElement.
	"""
	check_element_type(element_type)
	width, height = DEFAULT_ELEMENT_SIZES[element_type]
	font_size = DEFAULT_FONT_SIZE
	if element_type == "text":
		font_size = DEFAULT_TEXT_FONT_SIZE
	return LabelElement(
		id=element_id,
		type=element_type,
		x=DEFAULT_ELEMENT_X,
		y=DEFAULT_ELEMENT_Y,
		width=width,
		height=height,
		content=DEFAULT_ELEMENT_CONTENT[element_type],
		font_size=font_size,
		font_variant=DEFAULT_FONT_VARIANT,
	)


class LabelDocument:
	"""
	Ordered collection of label elements plus the resolution profile.

	Element order is paint order and emission order. Ids come from a
	per-document counter and are never reused, even after removal.
	"""

	def __init__(self, profile: ResolutionProfile | None = None) -> None:
		self.profile = profile or ResolutionProfile()
		self._elements: list[LabelElement] = []
		self._ids = itertools.count(1)

	def __len__(self) -> int:
		return len(self._elements)

	def add(self, element_type: str) -> LabelElement:
		element = build_default_element(next(self._ids), element_type)
		self._elements.append(element)
		return element

	def get(self, element_id: int) -> LabelElement | None:
		for element in self._elements:
			if element.id == element_id:
				return element
		return None

	def update(self, element_id: int, **fields) -> None:
		"""
		Merge fields into an element. Unknown ids are ignored.

		Args:
			element_id: Target element id.
			**fields: Field values to merge.
		"""
		if "id" in fields:
			raise ValueError("Element id cannot be changed")
		unknown = sorted(set(fields) - set(UPDATABLE_FIELDS))
		if unknown:
			raise ValueError(f"Unknown element fields: {', '.join(unknown)}")
		element = self.get(element_id)
		if element is None:
			return
		for name, value in fields.items():
			if name == "type":
				value = check_element_type(value)
			elif name in INT_FIELDS:
				value = coerce_non_negative(value)
			elif name == "font_variant":
				value = zlc.fragments.check_font_variant(value)
			elif value is None:
				value = ""
			else:
				value = str(value)
			setattr(element, name, value)

	def remove(self, element_id: int) -> None:
		self._elements = [element for element in self._elements if element.id != element_id]

	def list(self) -> list[LabelElement]:
		return list(self._elements)

	#============================================
	def to_dict(self) -> dict:
		"""
		Dump the document to plain data.
		"""
		return {
			"resolution": {
				"device_resolution": self.profile.device_resolution,
				"physical_size": self.profile.physical_size,
			},
			"elements": [dataclasses.asdict(element) for element in self._elements],
		}

	#============================================
	@classmethod
	def from_dict(cls, data: dict) -> "LabelDocument":
		"""
		Build a document from plain data.

		Element ids in the data are not kept; each element gets a fresh id
		so uniqueness holds even for hand-written files.

		Args:
			data: Mapping with optional "resolution" and "elements" keys.

		Returns:
			LabelDocument.
		"""
		resolution = data.get("resolution") or {}
		profile = ResolutionProfile(**resolution)
		document = cls(profile)
		for entry in data.get("elements", []):
			fields = dict(entry)
			fields.pop("id", None)
			element_type = fields.pop("type", None)
			if element_type is None:
				raise ValueError("Element entry is missing a type")
			element = document.add(element_type)
			document.update(element.id, **fields)
		return document


#============================================
def load_document(path: pathlib.Path) -> LabelDocument:
	"""
	Load a label document from a JSON file.

	Args:
		path: JSON file path.

	Returns:
		LabelDocument.
	"""
	with pathlib.Path(path).open("r", encoding="utf-8") as handle:
		data = json.load(handle)
	return LabelDocument.from_dict(data)


#============================================
def write_document(document: LabelDocument, path: pathlib.Path) -> None:
	"""
	Write a label document to a JSON file.

	Args:
		document: Document to write.
		path: Output path.
	"""
	with pathlib.Path(path).open("w", encoding="utf-8") as handle:
		json.dump(document.to_dict(), handle, indent=2, ensure_ascii=False)
