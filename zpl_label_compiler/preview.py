"""
Client for the remote ZPL rendering service.
"""

# Standard Library
import asyncio
import dataclasses
import io

# PIP3 modules
import PIL.Image
import requests

# local repo modules
import zpl_label_compiler as zlc
import zpl_label_compiler.config


ResolutionProfile = zlc.config.ResolutionProfile

PREVIEW_BASE_URL = zlc.config.PREVIEW_BASE_URL
PREVIEW_TIMEOUT = zlc.config.PREVIEW_TIMEOUT
PREVIEW_ACCEPT = zlc.config.PREVIEW_ACCEPT


class PreviewError(Exception):
	pass


@dataclasses.dataclass(frozen=True)
class PreviewResult:
	content: bytes
	content_type: str = PREVIEW_ACCEPT

	def to_image(self) -> PIL.Image.Image:
		"""
		Decode the image payload.
		"""
		image = PIL.Image.open(io.BytesIO(self.content))
		image.load()
		return image


class PreviewClient:
	"""
	Blocking HTTP client for the rendering service.

	One POST per call; no retry and no caching.
	"""

	def __init__(self, base_url: str = PREVIEW_BASE_URL, timeout: float = PREVIEW_TIMEOUT) -> None:
		self.base_url = base_url.rstrip("/")
		self.timeout = timeout

	def build_url(self, profile: ResolutionProfile) -> str:
		return f"{self.base_url}/printers/{profile.device_resolution}/labels/{profile.physical_size}/0/"

	def render(self, markup: str, profile: ResolutionProfile | None = None) -> PreviewResult:
		"""
		Render a program to an image.

		Args:
			markup: Program text.
			profile: Resolution profile; defaults to 8dpmm 4x6.

		Returns:
			PreviewResult with the image bytes.
		"""
		profile = profile or ResolutionProfile()
		url = self.build_url(profile)
		headers = {
			"Accept": PREVIEW_ACCEPT,
			"Content-Type": "application/x-www-form-urlencoded",
		}
		try:
			resp = requests.post(url, data=markup.encode("utf-8"), headers=headers, timeout=self.timeout)
		except requests.RequestException as exc:
			raise PreviewError(f"Preview service unreachable: {exc}") from exc
		if not 200 <= resp.status_code < 300:
			raise PreviewError(f"Preview service returned HTTP {resp.status_code}")
		content_type = resp.headers.get("Content-Type", PREVIEW_ACCEPT)
		return PreviewResult(content=resp.content, content_type=content_type)


class PreviewSession:
	"""
	Single-slot async wrapper around a PreviewClient.

	A new render() cancels the one still in flight. The superseded call
	resolves to None, so only the latest request's result is observed.
	"""

	def __init__(self, client: PreviewClient | None = None) -> None:
		self.client = client or PreviewClient()
		self._task: asyncio.Task | None = None

	async def render(self, markup: str, profile: ResolutionProfile | None = None) -> PreviewResult | None:
		previous = self._task
		if previous is not None and not previous.done():
			previous.cancel()
		task = asyncio.create_task(asyncio.to_thread(self.client.render, markup, profile))
		self._task = task
		try:
			result = await task
		except (asyncio.CancelledError, PreviewError):
			if self._task is not task:
				return None
			raise
		if self._task is not task:
			return None
		return result

	def cancel(self) -> None:
		"""
		Drop interest in the in-flight request; its caller gets None.
		"""
		task = self._task
		self._task = None
		if task is not None and not task.done():
			task.cancel()
