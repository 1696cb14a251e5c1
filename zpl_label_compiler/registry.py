"""
Template catalog registry: category -> template -> field schema and layout.
"""

# Standard Library
import dataclasses
import json
import pathlib


FIELD_KINDS = ("text", "barcode", "qrcode")
STEP_KINDS = ("title", "text", "barcode", "qrcode", "rule")
DEFAULT_CATALOG_PATH = pathlib.Path(__file__).with_name("catalog.json")


@dataclasses.dataclass(frozen=True)
class TemplateField:
	key: str
	label: str
	kind: str = "text"
	required: bool = False


@dataclasses.dataclass(frozen=True)
class LayoutStep:
	kind: str
	x: int
	y: int
	field: str | None = None
	text: str = ""
	prefix: str = ""
	suffix: str = ""
	fallback: str = ""
	optional: bool = False
	font_size: int = 25
	height: int = 100
	width: int = 300


@dataclasses.dataclass(frozen=True)
class TemplateSchema:
	name: str
	title: str
	fields: tuple[TemplateField, ...]
	layout: tuple[LayoutStep, ...]

	def field_keys(self) -> list[str]:
		return [field.key for field in self.fields]

	def get_field(self, key: str) -> TemplateField | None:
		for field in self.fields:
			if field.key == key:
				return field
		return None


@dataclasses.dataclass(frozen=True)
class TemplateCategory:
	name: str
	title: str
	templates: tuple[TemplateSchema, ...]


#============================================
def parse_template(data: dict) -> TemplateSchema:
	"""
	Parse and validate one template entry.

	Args:
		data: Template mapping from the catalog.

	Returns:
		TemplateSchema.
	"""
	name = data["name"]
	fields = tuple(TemplateField(**entry) for entry in data.get("fields", []))
	keys = [field.key for field in fields]
	if len(keys) != len(set(keys)):
		raise ValueError(f"Template {name} has duplicate field keys")
	for field in fields:
		if field.kind not in FIELD_KINDS:
			raise ValueError(f"Template {name} field {field.key} has unknown kind: {field.kind}")

	layout = tuple(LayoutStep(**entry) for entry in data.get("layout", []))
	for step in layout:
		if step.kind not in STEP_KINDS:
			raise ValueError(f"Template {name} has unknown layout step: {step.kind}")
		if step.kind in ("text", "barcode", "qrcode"):
			if step.field not in keys:
				raise ValueError(f"Template {name} layout refers to unknown field: {step.field}")
	return TemplateSchema(
		name=name,
		title=data.get("title", name),
		fields=fields,
		layout=layout,
	)


class TemplateRegistry:
	"""
	Loaded template catalog.

	Template names are unique across all categories so generators can look
	a template up by name alone.
	"""

	def __init__(self, categories: list[TemplateCategory]) -> None:
		self.categories = tuple(categories)
		self._templates: dict[str, TemplateSchema] = {}
		for category in self.categories:
			for template in category.templates:
				if template.name in self._templates:
					raise ValueError(f"Duplicate template name: {template.name}")
				self._templates[template.name] = template

	@classmethod
	def from_dict(cls, data: dict) -> "TemplateRegistry":
		categories = []
		for entry in data.get("categories", []):
			templates = tuple(parse_template(template) for template in entry.get("templates", []))
			categories.append(
				TemplateCategory(
					name=entry["name"],
					title=entry.get("title", entry["name"]),
					templates=templates,
				)
			)
		return cls(categories)

	def template_names(self) -> list[str]:
		return list(self._templates)

	def get_template(self, name: str) -> TemplateSchema:
		if name not in self._templates:
			raise KeyError(f"Unknown template: {name}")
		return self._templates[name]

	def get_category(self, name: str) -> TemplateCategory:
		for category in self.categories:
			if category.name == name:
				return category
		raise KeyError(f"Unknown category: {name}")


#============================================
def load_registry(path: pathlib.Path | None = None) -> TemplateRegistry:
	"""
	Load a template registry from a catalog JSON file.

	Args:
		path: Catalog path, or None for the bundled catalog.

	Returns:
		TemplateRegistry.
	"""
	catalog_path = pathlib.Path(path) if path is not None else DEFAULT_CATALOG_PATH
	with catalog_path.open("r", encoding="utf-8") as handle:
		data = json.load(handle)
	return TemplateRegistry.from_dict(data)
