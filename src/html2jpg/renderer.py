"""Playwright-backed renderer that screenshots a local HTML file to JPEG."""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Callable, Optional

from playwright.async_api import Browser, Page, async_playwright

from .config import RenderSettings
from .logger import debug_detail, get_logger, success
from .paths import file_url

LOGGER = get_logger("renderer")


class PlaywrightRenderer:
    """Render one HTML file per call in a freshly launched browser."""

    def __init__(
        self,
        settings: Optional[RenderSettings] = None,
        *,
        playwright_factory: Callable = async_playwright,
    ) -> None:
        self._settings = settings or RenderSettings()
        self._playwright_factory = playwright_factory

    @property
    def settings(self) -> RenderSettings:
        return self._settings

    async def render(self, html_path: Path | str, output_path: Path | str) -> None:
        """Write a viewport screenshot of ``html_path`` to ``output_path``.

        Errors from launch, navigation or capture are logged with the file
        pair and re-raised once the browser has been closed.
        """
        settings = self._settings
        try:
            async with self._playwright_factory() as playwright:
                browser_type = getattr(playwright, settings.browser_name)
                debug_detail(f"Launching {settings.browser_name} (headless={settings.headless})")
                browser = await browser_type.launch(headless=settings.headless)
                try:
                    async with _new_page(browser, settings) as page:
                        await self._capture(page, html_path, output_path)
                except BaseException:
                    await _close_after_failure(browser)
                    raise
                await browser.close()
        except Exception as exc:
            LOGGER.error("Failed to convert %s → %s: %s", html_path, output_path, exc)
            raise
        success(f"Converted: {html_path} → {output_path}")

    async def _capture(self, page: Page, html_path: Path | str, output_path: Path | str) -> None:
        settings = self._settings
        url = file_url(html_path)
        debug_detail(f"Navigating to {url} (wait_until={settings.wait_until})")
        await page.goto(url, wait_until=settings.wait_until)
        await page.screenshot(
            path=str(output_path),
            type=settings.image_type,
            quality=settings.quality,
            full_page=settings.full_page,
        )


async def _close_after_failure(browser: Browser) -> None:
    # The render error is the one worth reporting; a failed close only gets a warning.
    try:
        await browser.close()
    except Exception as exc:
        LOGGER.warning("Browser did not close cleanly: %s", exc)


@asynccontextmanager
async def _new_page(browser: Browser, settings: RenderSettings) -> AsyncIterator[Page]:
    context = await browser.new_context(
        viewport=settings.viewport,
        device_scale_factor=settings.device_scale_factor,
    )
    try:
        page = await context.new_page()
        try:
            yield page
        finally:
            await page.close()
    finally:
        await context.close()
