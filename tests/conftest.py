"""
Pytest configuration: local imports and shared fixtures.
"""

# Standard Library
import io
import os
import sys

# PIP3 modules
import PIL.Image
import pytest


#============================================
def _ensure_repo_on_path() -> None:
	"""
	Ensure the repository root is on sys.path so the package imports
	without an editable install.
	"""
	repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
	if repo_root not in sys.path:
		sys.path.insert(0, repo_root)


_ensure_repo_on_path()

import zpl_label_compiler.registry  # noqa: E402


#============================================
@pytest.fixture(scope="session")
def registry() -> zpl_label_compiler.registry.TemplateRegistry:
	"""
	The bundled template catalog.
	"""
	return zpl_label_compiler.registry.load_registry()


#============================================
@pytest.fixture
def png_bytes() -> bytes:
	"""
	A small PNG image as the rendering service would return it.
	"""
	image = PIL.Image.new("L", (80, 120), color=255)
	buffer = io.BytesIO()
	image.save(buffer, format="PNG")
	return buffer.getvalue()
