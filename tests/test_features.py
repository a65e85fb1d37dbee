from __future__ import annotations

import json
from pathlib import Path

import pytest

from vitesmith.config import CssOption, ProjectOptions
from vitesmith.errors import MissingSeedFileError, PatternMatchError, TemplateNotFoundError
from vitesmith.features import (
    CSSProvider,
    GitHooksProvider,
    LinterProvider,
    RouterProvider,
    StoreProvider,
    UnoCSSProvider,
    default_providers,
)
from vitesmith.template import TemplateRenderer


def _options(**overrides) -> ProjectOptions:
    return ProjectOptions(project_name="demo-app", **overrides)


def test_default_provider_order(renderer: TemplateRenderer):
    providers = default_providers(renderer)
    assert [provider.name for provider in providers] == [
        "router",
        "store",
        "eslint",
        "unocss",
        "css",
        "git-hooks",
    ]
    assert all(provider.renderer is renderer for provider in providers)


@pytest.mark.parametrize("typescript", [True, False])
def test_router_writes_files_and_patches_app(seed_project, renderer, typescript: bool):
    project = seed_project(typescript=typescript)
    ext = "ts" if typescript else "js"

    result = RouterProvider(renderer).setup(project, _options(router=True, typescript=typescript))

    router_source = (project / "src" / "router" / f"index.{ext}").read_text(encoding="utf-8")
    assert "createRouter" in router_source
    assert ("RouteRecordRaw" in router_source) is typescript
    assert "<h1>demo-app</h1>" in (project / "src" / "views" / "Home.vue").read_text(encoding="utf-8")

    app_vue = (project / "src" / "App.vue").read_text(encoding="utf-8")
    assert "<router-view />" in app_vue
    assert "HelloWorld" not in app_vue

    assert result.dependencies == ("vue-router",)
    assert result.imports == ("import router from './router'",)
    assert result.use_calls == (".use(router)",)


def test_router_setup_can_run_twice(seed_project, renderer):
    project = seed_project()
    provider = RouterProvider(renderer)
    provider.setup(project, _options(router=True))
    first = (project / "src" / "App.vue").read_text(encoding="utf-8")

    provider.setup(project, _options(router=True))
    assert (project / "src" / "App.vue").read_text(encoding="utf-8") == first


def test_router_requires_app_component(tmp_path: Path, renderer):
    with pytest.raises(MissingSeedFileError) as excinfo:
        RouterProvider(renderer).setup(tmp_path, _options(router=True))
    assert excinfo.value.feature == "router"


def test_router_requires_hello_world_placeholder(seed_project, renderer):
    project = seed_project()
    (project / "src" / "App.vue").write_text("<template><main /></template>\n", encoding="utf-8")
    with pytest.raises(PatternMatchError):
        RouterProvider(renderer).setup(project, _options(router=True))


def test_store_writes_store_modules(seed_project, renderer):
    project = seed_project(typescript=False)

    result = StoreProvider(renderer).setup(project, _options(store=True, typescript=False))

    assert "createPinia" in (project / "src" / "store" / "index.js").read_text(encoding="utf-8")
    assert "useCounterStore" in (project / "src" / "store" / "counter.js").read_text(encoding="utf-8")
    assert result.dependencies == ("pinia",)
    assert result.use_calls == (".use(pinia)",)


def test_linter_in_typescript_mode(seed_project, renderer):
    project = seed_project()

    result = LinterProvider(renderer).setup(project, _options(eslint=True, unocss=True))

    config = (project / "eslint.config.ts").read_text(encoding="utf-8")
    assert "  typescript: true,\n" in config
    assert "  unocss: true,\n" in config
    assert "{{" not in config

    tsconfig = json.loads((project / "tsconfig.node.json").read_text(encoding="utf-8"))
    assert tsconfig["include"] == ["vite.config.ts", "eslint.config.ts"]
    assert tsconfig["compilerOptions"]["moduleResolution"] == "bundler"

    assert result.dev_dependencies == ("eslint", "@antfu/eslint-config", "jiti")
    assert dict(result.scripts) == {"lint": "eslint . --fix"}


def test_linter_in_javascript_mode_leaves_tsconfig_alone(seed_project, renderer):
    project = seed_project(typescript=False)

    result = LinterProvider(renderer).setup(project, _options(eslint=True, typescript=False))

    config = (project / "eslint.config.js").read_text(encoding="utf-8")
    assert "typescript" not in config
    assert "unocss" not in config
    assert "vue: true,\n  ignores" in config
    assert not (project / "tsconfig.node.json").exists()
    assert "jiti" not in result.dev_dependencies


def test_linter_include_is_deduplicated(seed_project, renderer):
    project = seed_project()
    provider = LinterProvider(renderer)
    provider.setup(project, _options(eslint=True))
    provider.setup(project, _options(eslint=True))

    tsconfig = json.loads((project / "tsconfig.node.json").read_text(encoding="utf-8"))
    assert tsconfig["include"].count("eslint.config.ts") == 1


def test_linter_requires_tsconfig_node_in_typescript_mode(seed_project, renderer):
    project = seed_project()
    (project / "tsconfig.node.json").unlink()
    with pytest.raises(MissingSeedFileError):
        LinterProvider(renderer).setup(project, _options(eslint=True))


def test_unocss_patches_vite_config(seed_project, renderer):
    project = seed_project()

    result = UnoCSSProvider(renderer).setup(project, _options(unocss=True))

    vite_config = (project / "vite.config.ts").read_text(encoding="utf-8")
    assert "import UnoCSS from 'unocss/vite'" in vite_config
    assert "plugins: [UnoCSS(), vue()]" in vite_config
    assert (project / "uno.config.ts").is_file()
    assert result.imports == ("import 'virtual:uno.css'",)
    assert result.use_calls == ()


@pytest.mark.parametrize(
    ("css", "expected"),
    [
        (CssOption.SASS, ("sass",)),
        (CssOption.LESS, ("less",)),
        (CssOption.LIGHTNINGCSS, ("lightningcss", "browserslist")),
    ],
)
def test_css_dev_dependencies(seed_project, renderer, css: CssOption, expected):
    project = seed_project()
    result = CSSProvider(renderer).setup(project, _options(css=css))
    assert result.dev_dependencies == expected


def test_css_provider_disabled_without_strategy(renderer):
    assert not CSSProvider(renderer).enabled(_options())
    assert CSSProvider(renderer).enabled(_options(css="sass"))


def test_lightningcss_configures_vite(seed_project, renderer):
    project = seed_project()
    CSSProvider(renderer).setup(project, _options(css=CssOption.LIGHTNINGCSS))
    CSSProvider(renderer).setup(project, _options(css=CssOption.LIGHTNINGCSS))

    vite_config = (project / "vite.config.ts").read_text(encoding="utf-8")
    assert vite_config.count("import browserslist from 'browserslist'") == 1
    assert vite_config.count("transformer: 'lightningcss'") == 1
    assert "export default defineConfig({\n  css: {\n    transformer: 'lightningcss'," in vite_config
    assert "    cssMinify: 'lightningcss',\n" in vite_config


def test_preprocessor_does_not_touch_vite_config(seed_project, renderer):
    project = seed_project()
    before = (project / "vite.config.ts").read_text(encoding="utf-8")
    CSSProvider(renderer).setup(project, _options(css=CssOption.SASS))
    assert (project / "vite.config.ts").read_text(encoding="utf-8") == before


def test_git_hooks_scaffolding(seed_project, renderer):
    project = seed_project()

    result = GitHooksProvider(renderer).setup(project, _options(git_hooks=True))

    assert "@commitlint/config-conventional" in (project / "commitlint.config.js").read_text(encoding="utf-8")
    assert (project / ".husky" / "pre-commit").read_text(encoding="utf-8") == "npx lint-staged\n"
    assert "commitlint --edit" in (project / ".husky" / "commit-msg").read_text(encoding="utf-8")
    assert dict(result.scripts) == {"cz": "cz", "prepare": "husky"}
    assert dict(result.lint_staged) == {"*.{js,ts,vue}": "npx eslint --fix"}
    assert "husky" in result.dev_dependencies
    assert dict(result.package_config) == {"commitizen": {"path": "cz-conventional-changelog"}}


def test_missing_template_fails_provider(seed_project, tmp_path: Path):
    project = seed_project()
    provider = StoreProvider(TemplateRenderer(template_dir=tmp_path / "no-templates"))
    with pytest.raises(TemplateNotFoundError):
        provider.setup(project, _options(store=True))
