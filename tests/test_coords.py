import zpl_label_compiler.coords


#============================================
def test_map_axis_zero_and_scale() -> None:
	"""
	Zero maps to zero and pixels double into dots.
	"""
	assert zpl_label_compiler.coords.map_axis(0) == 0
	assert zpl_label_compiler.coords.map_axis(50) == 100
	assert zpl_label_compiler.coords.map_axis(12.25) == 25
	assert zpl_label_compiler.coords.map_axis(12.2) == 24


#============================================
def test_map_axis_monotonic() -> None:
	"""
	The mapping never decreases as the input grows.
	"""
	values = [step * 0.25 for step in range(0, 2400)]
	mapped = [zpl_label_compiler.coords.map_axis(value) for value in values]
	for previous, current in zip(mapped, mapped[1:]):
		assert current >= previous


#============================================
def test_round_size_half_up() -> None:
	"""
	Sizes round half up and are not rescaled.
	"""
	assert zpl_label_compiler.coords.round_size(200) == 200
	assert zpl_label_compiler.coords.round_size(2.5) == 3
	assert zpl_label_compiler.coords.round_size(3.5) == 4
	assert zpl_label_compiler.coords.round_size(2.49) == 2
