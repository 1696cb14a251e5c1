import pytest

import zpl_label_compiler.export


MARKUP = "^XA\n^CI28\n^FO100,100\n^A0N,25,25\n^FDSKU-`7`^FS\n\n^XZ"


#============================================
def test_zpl_and_optimized_formats() -> None:
	"""
	Raw export is untouched; optimized export drops blank lines.
	"""
	assert zpl_label_compiler.export.export_markup(MARKUP, "zpl") == MARKUP
	optimized = zpl_label_compiler.export.export_markup(MARKUP, "optimized")
	assert "\n\n" not in optimized
	assert optimized.endswith("^XZ")


#============================================
def test_variables_format() -> None:
	"""
	The variables format templatizes with the given form data.
	"""
	result = zpl_label_compiler.export.export_markup(MARKUP, "variables", {"sku": "SKU-`7`"})
	assert "^FD{{sku}}^FS" in result
	assert zpl_label_compiler.export.export_markup(MARKUP, "variables") == MARKUP


#============================================
def test_js_format_escapes_backticks() -> None:
	"""
	The JavaScript format is a template literal with backticks escaped.
	"""
	result = zpl_label_compiler.export.export_markup(MARKUP, "js")
	assert result.startswith("const zplCode = `^XA\n^CI28\n")
	assert "^FDSKU-\\`7\\`^FS" in result
	assert "`;\n" in result
	assert "9100" in result


#============================================
def test_unknown_format() -> None:
	"""
	Unknown export formats are errors.
	"""
	with pytest.raises(ValueError):
		zpl_label_compiler.export.export_markup(MARKUP, "epl")
