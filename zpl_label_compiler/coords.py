"""
Editor pixel to printer dot conversion.
"""

# Standard Library
import math

# local repo modules
import zpl_label_compiler as zlc
import zpl_label_compiler.config


PIXEL_TO_DOT_SCALE = zlc.config.PIXEL_TO_DOT_SCALE


#============================================
def round_half_up(value: float) -> int:
	"""
	Round to the nearest integer, halves away from zero.

	Args:
		value: Input value.

	Returns:
		Rounded integer.
	"""
	if value < 0:
		return -int(math.floor(-value + 0.5))
	return int(math.floor(value + 0.5))


#============================================
def map_axis(pixel_value: float, scale: float = PIXEL_TO_DOT_SCALE) -> int:
	"""
	Map an editor pixel coordinate to device dots.

	Args:
		pixel_value: Position in editor pixels.
		scale: Dots per editor pixel.

	Returns:
		Position in device dots.
	"""
	return round_half_up(pixel_value * scale)


#============================================
def round_size(value: float) -> int:
	"""
	Round a shape dimension to whole dots without rescaling.
	"""
	return round_half_up(value)
