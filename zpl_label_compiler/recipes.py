"""
Template recipe generation from form data.
"""

# local repo modules
import zpl_label_compiler as zlc
import zpl_label_compiler.config
import zpl_label_compiler.fragments
import zpl_label_compiler.registry


TemplateRegistry = zlc.registry.TemplateRegistry
TemplateSchema = zlc.registry.TemplateSchema
LayoutStep = zlc.registry.LayoutStep
fragments = zlc.fragments

DEFAULT_FONT_VARIANT = zlc.config.DEFAULT_FONT_VARIANT
QR_DATA_PREFIX = zlc.config.QR_DATA_PREFIX
LINE_HEIGHT = zlc.config.LINE_HEIGHT
LINE_THICKNESS = zlc.config.LINE_THICKNESS


#============================================
def resolve_step_value(step: LayoutStep, form_data: dict) -> str | None:
	"""
	Resolve the payload value for a field-bound layout step.

	Args:
		step: Layout step bound to a field.
		form_data: Field values keyed by field key.

	Returns:
		Value to emit, or None when the step must be omitted.
	"""
	value = form_data.get(step.field) or ""
	if value.strip():
		return value
	if step.optional:
		return None
	return step.fallback


#============================================
def build_step_fragments(step: LayoutStep, form_data: dict) -> list:
	"""
	Build the fragment records for one layout step.

	Args:
		step: Layout step.
		form_data: Field values keyed by field key.

	Returns:
		Fragment records, or an empty list when the step is omitted.
	"""
	origin = fragments.FieldOrigin(step.x, step.y)
	if step.kind == "title":
		return [
			origin,
			fragments.FontSelection(DEFAULT_FONT_VARIANT, step.font_size, step.font_size),
			fragments.FieldData(step.text),
		]
	if step.kind == "rule":
		return [origin, fragments.GraphicBox(step.width, LINE_HEIGHT, LINE_THICKNESS)]

	value = resolve_step_value(step, form_data)
	if value is None:
		return []
	if step.kind == "text":
		return [
			origin,
			fragments.FontSelection(DEFAULT_FONT_VARIANT, step.font_size, step.font_size),
			fragments.FieldData(f"{step.prefix}{value}{step.suffix}"),
		]
	if step.kind == "barcode":
		return [
			origin,
			fragments.BarcodeDefaults(),
			fragments.Code128(height=step.height),
			fragments.FieldData(value),
		]
	if step.kind == "qrcode":
		return [
			origin,
			fragments.QRCode(),
			fragments.FieldData(value, prefix=QR_DATA_PREFIX),
		]
	raise ValueError(f"Unknown layout step: {step.kind}")


#============================================
def build_template_fragments(template: TemplateSchema, form_data: dict) -> list:
	"""
	Build the complete fragment list for a template.

	Args:
		template: Template schema with its layout.
		form_data: Field values keyed by field key. Keys outside the schema
			are ignored.

	Returns:
		Fragment records, envelope included.
	"""
	known = set(template.field_keys())
	data = {key: value for key, value in form_data.items() if key in known}
	body: list = []
	for step in template.layout:
		step_fragments = build_step_fragments(step, data)
		if not step_fragments:
			continue
		body.extend(step_fragments)
		body.append(fragments.Separator())
	return fragments.wrap_program(body)


#============================================
def generate_template(registry: TemplateRegistry, template_name: str, form_data: dict) -> str:
	"""
	Generate the ZPL program for a catalog template.

	Args:
		registry: Loaded template registry.
		template_name: Template name such as "shipping".
		form_data: Field values keyed by field key.

	Returns:
		Program text.
	"""
	template = registry.get_template(template_name)
	return fragments.render_program(build_template_fragments(template, form_data))


#============================================
def missing_required_fields(template: TemplateSchema, form_data: dict) -> list[str]:
	"""
	List required fields without a value.

	Generation still succeeds for these; callers use the list to flag input.

	Args:
		template: Template schema.
		form_data: Field values keyed by field key.

	Returns:
		Missing field keys in schema order.
	"""
	missing = []
	for field in template.fields:
		value = form_data.get(field.key) or ""
		if field.required and not value.strip():
			missing.append(field.key)
	return missing
