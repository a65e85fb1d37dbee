from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from vitesmith.template import TemplateRenderer  # noqa: E402


SEED_MANIFEST = {
    "name": "demo-app",
    "private": True,
    "version": "0.0.0",
    "type": "module",
    "scripts": {
        "dev": "vite",
        "build": "vue-tsc -b && vite build",
        "preview": "vite preview",
    },
    "dependencies": {"vue": "^3.5.13"},
    "devDependencies": {
        "@vitejs/plugin-vue": "^5.2.3",
        "typescript": "~5.8.3",
        "vite": "^6.3.5",
        "vue-tsc": "^2.2.8",
    },
}

SEED_MAIN = """\
import { createApp } from 'vue'
import './style.css'
import App from './App.vue'

createApp(App).mount('#app')
"""

SEED_APP_VUE = """\
<script setup lang="ts">
import HelloWorld from './components/HelloWorld.vue'
</script>

<template>
  <div>
    <a href="https://vite.dev" target="_blank">
      <img src="/vite.svg" class="logo" alt="Vite logo" />
    </a>
  </div>
  <HelloWorld msg="Vite + Vue" />
</template>
"""

SEED_VITE_CONFIG = """\
import { defineConfig } from 'vite'
import vue from '@vitejs/plugin-vue'

// https://vite.dev/config/
export default defineConfig({
  plugins: [vue()],
})
"""

SEED_TSCONFIG_NODE = """\
{
  "compilerOptions": {
    "tsBuildInfoFile": "./node_modules/.tmp/tsconfig.node.tsbuildinfo",
    "target": "ES2022",

    /* Bundler mode */
    "moduleResolution": "bundler",
    "noEmit": true
  },
  // build tooling sources
  "include": ["vite.config.ts"]
}
"""

SeedFactory = Callable[..., Path]


def write_seed_project(root: Path, *, typescript: bool = True) -> Path:
    """Write the files ``create vite`` would leave behind into ``root``."""

    ext = "ts" if typescript else "js"
    (root / "src").mkdir(parents=True, exist_ok=True)
    (root / "package.json").write_text(json.dumps(SEED_MANIFEST, indent=2) + "\n", encoding="utf-8")
    (root / "src" / f"main.{ext}").write_text(SEED_MAIN, encoding="utf-8")
    (root / "src" / "App.vue").write_text(SEED_APP_VUE, encoding="utf-8")
    (root / f"vite.config.{ext}").write_text(
        SEED_VITE_CONFIG.replace("vite.config.ts", f"vite.config.{ext}"), encoding="utf-8"
    )
    if typescript:
        (root / "tsconfig.node.json").write_text(SEED_TSCONFIG_NODE, encoding="utf-8")
    return root


@pytest.fixture()
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


@pytest.fixture()
def seed_project(tmp_path: Path) -> SeedFactory:
    """Return a factory creating seed projects below ``tmp_path``."""

    def factory(name: str = "demo-app", *, typescript: bool = True) -> Path:
        return write_seed_project(tmp_path / name, typescript=typescript)

    return factory
