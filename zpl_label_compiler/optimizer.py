"""
Whitespace and comment stripping for generated programs.
"""

# local repo modules
import zpl_label_compiler as zlc
import zpl_label_compiler.config


COMMENT_PREFIXES = zlc.config.COMMENT_PREFIXES


#============================================
def optimize(markup: str, comment_prefixes: tuple[str, ...] = COMMENT_PREFIXES) -> str:
	"""
	Strip blank lines, comment lines and surrounding whitespace.

	Retained lines keep their order and their inner characters, so the
	pass is idempotent.

	Args:
		markup: Program text.
		comment_prefixes: Line prefixes that mark a comment.

	Returns:
		Optimized program text.
	"""
	kept: list[str] = []
	for line in markup.split("\n"):
		stripped = line.strip()
		if not stripped:
			continue
		if comment_prefixes and stripped.startswith(tuple(comment_prefixes)):
			continue
		kept.append(stripped)
	return "\n".join(kept)
