"""
CLI entry points for ZPL label generation.
"""

# Standard Library
import argparse
import pathlib
import sys
import time

# local repo modules
import zpl_label_compiler as zlc
import zpl_label_compiler.config
import zpl_label_compiler.elements
import zpl_label_compiler.emitter
import zpl_label_compiler.export
import zpl_label_compiler.preview
import zpl_label_compiler.proof
import zpl_label_compiler.recipes
import zpl_label_compiler.registry


ResolutionProfile = zlc.config.ResolutionProfile

DEVICE_RESOLUTIONS = zlc.config.DEVICE_RESOLUTIONS
LABEL_SIZES = zlc.config.LABEL_SIZES
DEFAULT_RESOLUTION = zlc.config.DEFAULT_RESOLUTION
DEFAULT_LABEL_SIZE = zlc.config.DEFAULT_LABEL_SIZE
PREVIEW_BASE_URL = zlc.config.PREVIEW_BASE_URL
EXPORT_FORMATS = zlc.export.EXPORT_FORMATS


#============================================
def parse_field_args(values: list[str] | None) -> dict[str, str]:
	"""
	Parse repeated key=value arguments into form data.

	Args:
		values: Raw "key=value" strings.

	Returns:
		Form data in argument order.
	"""
	form_data: dict[str, str] = {}
	for raw in values or []:
		if "=" not in raw:
			raise ValueError(f"Field must be key=value: {raw}")
		key, value = raw.split("=", 1)
		form_data[key.strip()] = value
	return form_data


#============================================
def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse command line arguments.

	Args:
		argv: Argument list, or None for sys.argv.

	Returns:
		Parsed argparse namespace.
	"""
	parser = argparse.ArgumentParser(description="Generate ZPL label programs.")

	source_group = parser.add_argument_group("Source")
	source = source_group.add_mutually_exclusive_group(required=True)
	source.add_argument("-i", "--document", dest="document_path", default=None, help="Label document JSON.")
	source.add_argument("-t", "--template", dest="template_name", default=None, help="Catalog template name.")
	source.add_argument("-z", "--zpl", dest="zpl_path", default=None, help="Existing ZPL program file.")
	source.add_argument("-L", "--list-templates", dest="list_templates", action="store_true", help="List catalog templates.")
	source_group.add_argument("-f", "--field", dest="fields", action="append", default=None, help="Template field as key=value.")
	source_group.add_argument("-c", "--catalog", dest="catalog_path", default=None, help="Catalog JSON path.")

	output_group = parser.add_argument_group("Output")
	output_group.add_argument("-o", "--output", dest="output_path", default=None, help="Output path; stdout if omitted.")
	output_group.add_argument("-F", "--format", dest="export_format", choices=EXPORT_FORMATS, default="zpl", help="Export format.")

	profile_group = parser.add_argument_group("Profile")
	profile_group.add_argument("-r", "--resolution", dest="resolution", choices=sorted(DEVICE_RESOLUTIONS), default=None, help="Device resolution.")
	profile_group.add_argument("-s", "--size", dest="label_size", choices=sorted(LABEL_SIZES), default=None, help="Label size.")

	preview_group = parser.add_argument_group("Preview")
	preview_group.add_argument("-p", "--preview", dest="preview_path", default=None, help="Write a rendered PNG preview.")
	preview_group.add_argument("-P", "--proof", dest="proof_path", default=None, help="Write a proof PDF of the preview.")
	preview_group.add_argument("--preview-url", dest="preview_url", default=PREVIEW_BASE_URL, help="Rendering service base URL.")

	args = parser.parse_args(argv)
	return args


#============================================
def build_profile(args: argparse.Namespace, base: ResolutionProfile | None = None) -> ResolutionProfile:
	"""
	Build the resolution profile, letting CLI flags override the document.

	Args:
		args: Parsed argparse namespace.
		base: Profile from the loaded document, if any.

	Returns:
		ResolutionProfile.
	"""
	base = base or ResolutionProfile()
	return ResolutionProfile(
		device_resolution=args.resolution or base.device_resolution,
		physical_size=args.label_size or base.physical_size,
	)


#============================================
def print_templates(registry: zlc.registry.TemplateRegistry) -> None:
	"""
	Print the catalog tree.

	Args:
		registry: Loaded template registry.
	"""
	for category in registry.categories:
		print(f"{category.name}: {category.title}")
		for template in category.templates:
			print(f"  {template.name}: {template.title}")
			for field in template.fields:
				marker = "*" if field.required else " "
				print(f"    {marker} {field.key} ({field.kind}) {field.label}")


#============================================
def load_source(args: argparse.Namespace, registry: zlc.registry.TemplateRegistry, form_data: dict, status_stream) -> tuple[str, ResolutionProfile]:
	"""
	Produce the program text from the selected source.

	Args:
		args: Parsed argparse namespace.
		registry: Loaded template registry.
		form_data: Template field values.
		status_stream: Stream for progress lines.

	Returns:
		Tuple of (program text, resolution profile).
	"""
	if args.document_path:
		document = zlc.elements.load_document(pathlib.Path(args.document_path))
		print(f"Document: {args.document_path} ({len(document)} elements)", file=status_stream)
		return zlc.emitter.emit_document(document), build_profile(args, document.profile)
	if args.zpl_path:
		markup = pathlib.Path(args.zpl_path).read_text(encoding="utf-8")
		print(f"Program: {args.zpl_path} ({len(markup.splitlines())} lines)", file=status_stream)
		return markup, build_profile(args)
	template = registry.get_template(args.template_name)
	print(f"Template: {template.name}", file=status_stream)
	missing = zlc.recipes.missing_required_fields(template, form_data)
	if missing:
		print(f"Missing required fields: {', '.join(missing)}", file=status_stream)
	return zlc.recipes.generate_template(registry, template.name, form_data), build_profile(args)


#============================================
def run_pipeline(args: argparse.Namespace) -> str | None:
	"""
	Run generation, export and optional preview.

	Progress lines go to stdout when the export is written to a file and
	to stderr when the export itself is printed.

	Args:
		args: Parsed argparse namespace.

	Returns:
		Exported text, or None when only listing templates.
	"""
	registry = zlc.registry.load_registry(args.catalog_path)
	if args.list_templates:
		print_templates(registry)
		return None

	start_time = time.perf_counter()
	status_stream = sys.stdout if args.output_path else sys.stderr
	form_data = parse_field_args(args.fields)
	markup, profile = load_source(args, registry, form_data, status_stream)
	print(f"Profile: {profile.device_resolution} {profile.physical_size}", file=status_stream)

	exported = zlc.export.export_markup(markup, args.export_format, form_data)
	if args.output_path:
		output_path = pathlib.Path(args.output_path)
		output_path.write_text(exported, encoding="utf-8")
		print(f"Output ({args.export_format}): {output_path}", file=status_stream)
	else:
		print(exported)

	if (args.preview_path or args.proof_path) and not markup.strip():
		print("Empty program, preview skipped", file=status_stream)
	elif args.preview_path or args.proof_path:
		client = zlc.preview.PreviewClient(base_url=args.preview_url)
		print(f"Requesting preview: {client.build_url(profile)}", file=status_stream)
		result = client.render(markup, profile)
		if args.preview_path:
			pathlib.Path(args.preview_path).write_bytes(result.content)
			print(f"Preview written: {args.preview_path}", file=status_stream)
		if args.proof_path:
			zlc.proof.write_proof_pdf(result, profile, pathlib.Path(args.proof_path))
			print(f"Proof written: {args.proof_path}", file=status_stream)

	total_time = time.perf_counter() - start_time
	print(f"Timing: total={total_time:.2f}s", file=status_stream)
	return exported


#============================================
def main() -> None:
	"""
	Main entry point.
	"""
	args = parse_args()
	run_pipeline(args)
