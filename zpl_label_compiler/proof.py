"""
Proof PDF output for rendered previews.
"""

# Standard Library
import pathlib

# PIP3 modules
import reportlab.lib.utils
import reportlab.pdfgen.canvas

# local repo modules
import zpl_label_compiler as zlc
import zpl_label_compiler.config
import zpl_label_compiler.preview


ResolutionProfile = zlc.config.ResolutionProfile
PreviewResult = zlc.preview.PreviewResult


#============================================
def compute_fit_box(
	page_width: float,
	page_height: float,
	image_width: int,
	image_height: int,
) -> tuple[float, float, float, float]:
	"""
	Fit an image inside the page, keeping its aspect ratio.

	Args:
		page_width: Page width in points.
		page_height: Page height in points.
		image_width: Image width in pixels.
		image_height: Image height in pixels.

	Returns:
		Tuple of (x, y, width, height) in points.
	"""
	if image_width <= 0 or image_height <= 0:
		return (0.0, 0.0, page_width, page_height)
	scale = min(page_width / image_width, page_height / image_height)
	width = image_width * scale
	height = image_height * scale
	return ((page_width - width) / 2.0, (page_height - height) / 2.0, width, height)


#============================================
def write_proof_pdf(
	result: PreviewResult,
	profile: ResolutionProfile,
	output_path: pathlib.Path,
) -> pathlib.Path:
	"""
	Write a one-page PDF of the preview at the label's physical size.

	Args:
		result: Preview result holding image bytes.
		profile: Resolution profile of the label.
		output_path: Output PDF path.

	Returns:
		Output path.
	"""
	image = result.to_image()
	page_width, page_height = zlc.config.label_size_points(profile.physical_size)
	x, y, width, height = compute_fit_box(page_width, page_height, image.width, image.height)
	pdf = reportlab.pdfgen.canvas.Canvas(
		str(output_path),
		pagesize=(page_width, page_height),
	)
	pdf.drawImage(
		reportlab.lib.utils.ImageReader(image),
		x,
		y,
		width=width,
		height=height,
		mask=None,
		preserveAspectRatio=False,
		anchor="sw",
	)
	pdf.showPage()
	pdf.save()
	return pathlib.Path(output_path)
