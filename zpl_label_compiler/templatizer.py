"""
Turn a generated program into a reusable template with {{key}} placeholders.

Substitution is literal: values are escaped before matching and markup
structure is never inspected. Values are matched longest first in a single
scan, so a short value never eats part of a longer one and placeholders
already written are never rescanned.
"""

# Standard Library
import re

# local repo modules
import zpl_label_compiler as zlc
import zpl_label_compiler.fragments


hex_escape = zlc.fragments.hex_escape


#============================================
def placeholder(key: str) -> str:
	return "{{" + key + "}}"


#============================================
def ordered_values(form_data: dict) -> list[tuple[str, str]]:
	"""
	Order non-empty form values for matching.

	Longer values come first. Equal lengths keep insertion order, and a
	value repeated under a second key is dropped so the first key wins.

	Args:
		form_data: Field values keyed by field key.

	Returns:
		List of (key, value) pairs.
	"""
	seen: set[str] = set()
	pairs: list[tuple[str, str]] = []
	for key, value in form_data.items():
		if not value or value in seen:
			continue
		seen.add(value)
		pairs.append((key, value))
	# sorted() is stable, so ties stay in insertion order
	return sorted(pairs, key=lambda pair: -len(pair[1]))


#============================================
def templatize(markup: str, form_data: dict) -> str:
	"""
	Replace literal form values in markup with named placeholders.

	Args:
		markup: Generated program text.
		form_data: Field values keyed by field key.

	Returns:
		Template text.
	"""
	pairs = ordered_values(form_data)
	if not pairs:
		return markup
	keys_by_value: dict[str, str] = {}
	for key, value in pairs:
		keys_by_value.setdefault(value, key)
		# payloads holding ^ or ~ are written in ^FH hex form
		keys_by_value.setdefault(hex_escape(value), key)
	alternatives = sorted(keys_by_value, key=len, reverse=True)
	pattern = re.compile("|".join(re.escape(value) for value in alternatives))
	return pattern.sub(lambda match: placeholder(keys_by_value[match.group(0)]), markup)


#============================================
def templatize_sequential(markup: str, form_data: dict) -> str:
	"""
	Replace values one key at a time in insertion order.

	An earlier value that is a substring of a later one consumes part of
	it. Kept to compare against templatize().

	Args:
		markup: Generated program text.
		form_data: Field values keyed by field key.

	Returns:
		Template text.
	"""
	result = markup
	for key, value in form_data.items():
		if value:
			result = result.replace(value, placeholder(key))
	return result


#============================================
def find_overlapping_values(form_data: dict) -> list[tuple[str, str]]:
	"""
	Find field values contained in another field's value.

	Args:
		form_data: Field values keyed by field key.

	Returns:
		List of (shorter_key, longer_key) pairs.
	"""
	items = [(key, value) for key, value in form_data.items() if value]
	overlaps = []
	for short_key, short_value in items:
		for long_key, long_value in items:
			if short_key == long_key:
				continue
			if len(short_value) < len(long_value) and short_value in long_value:
				overlaps.append((short_key, long_key))
	return overlaps
