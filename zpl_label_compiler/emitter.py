"""
Label document to ZPL program emission.
"""

# local repo modules
import zpl_label_compiler as zlc
import zpl_label_compiler.config
import zpl_label_compiler.coords
import zpl_label_compiler.elements
import zpl_label_compiler.fragments


LabelElement = zlc.elements.LabelElement
LabelDocument = zlc.elements.LabelDocument
fragments = zlc.fragments

BOX_THICKNESS = zlc.config.BOX_THICKNESS
LINE_HEIGHT = zlc.config.LINE_HEIGHT
LINE_THICKNESS = zlc.config.LINE_THICKNESS
QR_DATA_PREFIX = zlc.config.QR_DATA_PREFIX


#============================================
def build_element_fragments(element: LabelElement) -> list:
	"""
	Build the fragment records for one element.

	Args:
		element: Label element.

	Returns:
		Field origin record followed by the type-specific records.
	"""
	origin = fragments.FieldOrigin(
		zlc.coords.map_axis(element.x),
		zlc.coords.map_axis(element.y),
	)
	if element.type == "text":
		body = [
			fragments.FontSelection(element.font_variant, element.font_size, element.font_size),
			fragments.FieldData(element.content),
		]
	elif element.type == "barcode":
		body = [
			fragments.BarcodeDefaults(),
			fragments.Code128(height=zlc.coords.round_size(element.height)),
			fragments.FieldData(element.content),
		]
	elif element.type == "qrcode":
		body = [
			fragments.QRCode(),
			fragments.FieldData(element.content, prefix=QR_DATA_PREFIX),
		]
	elif element.type == "box":
		body = [
			fragments.GraphicBox(
				zlc.coords.round_size(element.width),
				zlc.coords.round_size(element.height),
				BOX_THICKNESS,
			),
		]
	elif element.type == "line":
		# a line is a box with a fixed height
		body = [
			fragments.GraphicBox(
				zlc.coords.round_size(element.width),
				LINE_HEIGHT,
				LINE_THICKNESS,
			),
		]
	else:
		raise ValueError(f"Unknown element type: {element.type}")
	return [origin] + body


#============================================
def build_fragments(document: LabelDocument) -> list:
	"""
	Build the complete fragment list for a document.

	Args:
		document: Label document.

	Returns:
		Fragment records in emission order, envelope included.
	"""
	body: list = []
	for element in document.list():
		body.extend(build_element_fragments(element))
		body.append(fragments.Separator())
	return fragments.wrap_program(body)


#============================================
def emit_document(document: LabelDocument) -> str:
	"""
	Emit the ZPL program for a document.

	Args:
		document: Label document.

	Returns:
		Program text.
	"""
	return fragments.render_program(build_fragments(document))
