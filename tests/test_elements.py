import pathlib

import pytest

import zpl_label_compiler.config
import zpl_label_compiler.elements
import zpl_label_compiler.emitter


LabelDocument = zpl_label_compiler.elements.LabelDocument


#============================================
def test_add_assigns_unique_ids_and_defaults() -> None:
	"""
	Every element type gets a fresh id and nonzero shape defaults.
	"""
	document = LabelDocument()
	elements = [document.add(element_type) for element_type in zpl_label_compiler.config.ELEMENT_TYPES]
	ids = [element.id for element in elements]
	assert len(set(ids)) == len(ids)
	for element in elements:
		assert element.x == 50
		assert element.y == 50
		if element.type != "text":
			assert element.width > 0
			assert element.height > 0

	text = elements[0]
	assert text.content == "New text"
	assert text.font_size == 25
	assert text.font_variant == "A0N"
	barcode = elements[1]
	assert (barcode.width, barcode.height) == (300, 60)
	assert barcode.content == "1234567890"


#============================================
def test_add_rejects_unknown_type() -> None:
	"""
	Unknown element types are refused.
	"""
	with pytest.raises(ValueError):
		LabelDocument().add("circle")


#============================================
def test_ids_not_reused_after_remove() -> None:
	"""
	Removing an element never frees its id for reuse.
	"""
	document = LabelDocument()
	first = document.add("box")
	document.remove(first.id)
	second = document.add("box")
	assert second.id != first.id
	assert [element.id for element in document.list()] == [second.id]


#============================================
def test_update_merges_and_clamps() -> None:
	"""
	Update merges fields, coerces numbers and clamps negatives.
	"""
	document = LabelDocument()
	element = document.add("text")
	document.update(element.id, x=-20, y="35", content="Hello", font_size="30")
	assert element.x == 0
	assert element.y == 35
	assert element.content == "Hello"
	assert element.font_size == 30
	assert element.width == 200


#============================================
@pytest.mark.parametrize("raw", ["nan", "inf", "-inf", "1e400", None, "abc", float("nan")])
def test_update_non_finite_numbers_become_zero(raw) -> None:
	"""
	Unparsable, missing and non-finite numbers coerce to 0.
	"""
	document = LabelDocument()
	element = document.add("box")
	document.update(element.id, x=raw)
	assert element.x == 0


#============================================
def test_from_dict_null_coordinate() -> None:
	"""
	A JSON null coordinate loads as 0.
	"""
	document = LabelDocument.from_dict({"elements": [{"type": "text", "x": None, "y": 12}]})
	element = document.list()[0]
	assert element.x == 0
	assert element.y == 12


#============================================
def test_update_rejects_bad_font_variant() -> None:
	"""
	A font variant that is not a font selector is refused, so the program
	keeps one field origin per element.
	"""
	document = LabelDocument()
	element = document.add("text")
	with pytest.raises(ValueError):
		document.update(element.id, font_variant="A0N,1,1^FS^XZ^XA^FO9,9^A0N")
	assert element.font_variant == "A0N"
	markup = zpl_label_compiler.emitter.emit_document(document)
	assert markup.count("^FO") == 1
	assert markup.count("^XZ") == 1


#============================================
def test_update_accepts_font_variant() -> None:
	document = LabelDocument()
	element = document.add("text")
	document.update(element.id, font_variant="BR")
	assert element.font_variant == "BR"
	document.update(element.id, font_variant="A0R")
	markup = zpl_label_compiler.emitter.emit_document(document)
	assert "^A0R,25,25" in markup


#============================================
def test_update_unknown_id_is_silent() -> None:
	"""
	Updating a missing id does nothing.
	"""
	document = LabelDocument()
	element = document.add("line")
	document.update(element.id + 100, x=10)
	assert element.x == 50


#============================================
def test_update_rejects_id_and_unknown_fields() -> None:
	"""
	The id is immutable and unknown field names are errors.
	"""
	document = LabelDocument()
	element = document.add("qrcode")
	with pytest.raises(ValueError):
		document.update(element.id, id=99)
	with pytest.raises(ValueError):
		document.update(element.id, colour="red")


#============================================
def test_list_preserves_order_and_is_a_copy() -> None:
	"""
	list() returns insertion order and cannot mutate the document.
	"""
	document = LabelDocument()
	types = ["box", "text", "barcode"]
	for element_type in types:
		document.add(element_type)
	listed = document.list()
	assert [element.type for element in listed] == types
	listed.clear()
	assert len(document) == 3


#============================================
def test_document_json_roundtrip(tmp_path: pathlib.Path) -> None:
	"""
	A written document loads back with the same elements and profile.
	"""
	profile = zpl_label_compiler.config.ResolutionProfile("12dpmm", "3x2")
	document = LabelDocument(profile)
	element = document.add("text")
	document.update(element.id, content="한글 라벨", x=10, y=20)
	document.add("box")

	path = tmp_path / "label.json"
	zpl_label_compiler.elements.write_document(document, path)
	loaded = zpl_label_compiler.elements.load_document(path)

	assert loaded.profile == profile
	assert [(item.type, item.x, item.y, item.content) for item in loaded.list()] == [
		("text", 10, 20, "한글 라벨"),
		("box", 50, 50, ""),
	]


#============================================
def test_from_dict_requires_type() -> None:
	"""
	Element entries without a type are rejected.
	"""
	with pytest.raises(ValueError):
		LabelDocument.from_dict({"elements": [{"x": 1}]})


#============================================
def test_profile_rejects_unknown_classes() -> None:
	"""
	Unknown resolution or size classes are refused.
	"""
	with pytest.raises(ValueError):
		zpl_label_compiler.config.ResolutionProfile("7dpmm", "4x6")
	with pytest.raises(ValueError):
		zpl_label_compiler.config.ResolutionProfile("8dpmm", "5x5")
	profile = zpl_label_compiler.config.ResolutionProfile()
	assert profile.canvas_size == (600, 400)
	assert profile.dpi == 203
