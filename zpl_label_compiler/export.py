"""
Copy/export formats for generated programs.
"""

# local repo modules
import zpl_label_compiler as zlc
import zpl_label_compiler.optimizer
import zpl_label_compiler.templatizer


EXPORT_FORMATS = ("zpl", "optimized", "variables", "js")

JS_PRINTER_NOTES = """
// Sending the program to a printer:
// 1. Browser with WebUSB (Zebra vendor id 0x0a5f):
//    const device = await navigator.usb.requestDevice({ filters: [{ vendorId: 0x0a5f }] });
// 2. Node.js over a serial port:
//    const port = new SerialPort({ path: '/dev/ttyUSB0', baudRate: 9600 });
//    port.write(zplCode);
// 3. Network printer on raw port 9100:
//    socket.connect(9100, '192.168.1.100', () => socket.end(zplCode));
"""


#============================================
def format_as_javascript(markup: str) -> str:
	"""
	Wrap the optimized program in a JavaScript template literal.

	Args:
		markup: Program text.

	Returns:
		JavaScript source text.
	"""
	optimized = zlc.optimizer.optimize(markup)
	escaped = optimized.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")
	return f"const zplCode = `{escaped}`;\n{JS_PRINTER_NOTES}"


#============================================
def export_markup(markup: str, export_format: str, form_data: dict | None = None) -> str:
	"""
	Render a program in one of the export formats.

	Args:
		markup: Program text.
		export_format: One of EXPORT_FORMATS.
		form_data: Field values, used by the "variables" format.

	Returns:
		Exported text.
	"""
	if export_format == "zpl":
		return markup
	if export_format == "optimized":
		return zlc.optimizer.optimize(markup)
	if export_format == "variables":
		return zlc.templatizer.templatize(markup, form_data or {})
	if export_format == "js":
		return format_as_javascript(markup)
	raise ValueError(f"Unknown export format: {export_format}")
