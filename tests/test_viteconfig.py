from __future__ import annotations

from pathlib import Path

import pytest

from vitesmith.errors import PatternMatchError
from vitesmith.viteconfig import add_config_block, add_imports, add_plugin

CONFIG_PATH = Path("vite.config.ts")

SEED = """\
import { defineConfig } from 'vite'
import vue from '@vitejs/plugin-vue'

export default defineConfig({
  plugins: [vue()],
})
"""


def test_add_imports_after_last_import():
    patched = add_imports(SEED, ["import UnoCSS from 'unocss/vite'"], path=CONFIG_PATH)
    assert patched.splitlines()[:3] == [
        "import { defineConfig } from 'vite'",
        "import vue from '@vitejs/plugin-vue'",
        "import UnoCSS from 'unocss/vite'",
    ]


def test_add_imports_is_idempotent():
    once = add_imports(SEED, ["import UnoCSS from 'unocss/vite'"], path=CONFIG_PATH)
    assert add_imports(once, ["import UnoCSS from 'unocss/vite'"], path=CONFIG_PATH) == once


def test_add_imports_without_anchor_is_fatal():
    with pytest.raises(PatternMatchError):
        add_imports("export default {}\n", ["import a from 'a'"], path=CONFIG_PATH)


def test_add_plugin_to_inline_list():
    patched = add_plugin(SEED, "UnoCSS()", path=CONFIG_PATH)
    assert "  plugins: [UnoCSS(), vue()]," in patched
    assert add_plugin(patched, "UnoCSS()", path=CONFIG_PATH) == patched


def test_add_plugin_to_multiline_list():
    content = "defineConfig({\n  plugins: [\n    vue(),\n  ],\n})\n"
    patched = add_plugin(content, "UnoCSS()", path=CONFIG_PATH)
    assert patched == "defineConfig({\n  plugins: [\n    UnoCSS(),\n    vue(),\n  ],\n})\n"


def test_add_plugin_to_empty_list():
    assert add_plugin("plugins: []", "UnoCSS()", path=CONFIG_PATH) == "plugins: [UnoCSS()]"


def test_add_plugin_without_plugins_list_is_fatal():
    with pytest.raises(PatternMatchError) as excinfo:
        add_plugin("export default defineConfig({})\n", "UnoCSS()", path=CONFIG_PATH)
    assert excinfo.value.matches == 0


def test_add_config_block_indents_entries():
    patched = add_config_block(
        SEED,
        "build: {\n  cssMinify: 'lightningcss',\n},",
        marker="cssMinify",
        path=CONFIG_PATH,
    )
    assert "export default defineConfig({\n  build: {\n    cssMinify: 'lightningcss',\n  },\n  plugins" in patched
    assert add_config_block(patched, "build: {},", marker="cssMinify", path=CONFIG_PATH) == patched
