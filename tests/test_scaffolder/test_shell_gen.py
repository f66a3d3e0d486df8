"""Tests for the navigation menu and shell assembly (ngscaffold.scaffolder.shell_gen)."""

from __future__ import annotations

import pytest

from ngscaffold.config import LayoutOptions
from ngscaffold.parser.errors import SpecificationError
from ngscaffold.parser.models import MenuType
from ngscaffold.scaffolder.shell_gen import ShellGenerator, menu_class, menu_links

pytestmark = pytest.mark.unit


@pytest.fixture
def shell(renderer) -> ShellGenerator:
    return ShellGenerator(renderer)


class TestMenuClass:
    @pytest.mark.parametrize("menu_type,use_bootstrap,expected", [
        (MenuType.HORIZONTAL, True, "nav nav-pills"),
        (MenuType.VERTICAL, True, "nav flex-column"),
        (MenuType.HORIZONTAL, False, "custom-horizontal-menu"),
        (MenuType.VERTICAL, False, "custom-vertical-menu"),
    ])
    def test_classes(self, menu_type, use_bootstrap, expected):
        assert menu_class(menu_type, use_bootstrap) == expected


class TestMenuLinks:
    def test_labels_and_paths(self, example_spec):
        assert menu_links(example_spec.components) == [
            {"label": "Sign Up", "path": "register"},
            {"label": "About", "path": "about"},
        ]


class TestRenderMenu:
    def test_bootstrap_links(self, shell, example_spec, bootstrap_layout):
        nav = shell.render_menu(example_spec.components, MenuType.HORIZONTAL, bootstrap_layout)
        assert nav.startswith('<nav class="nav nav-pills">')
        assert nav.endswith("</nav>")
        assert nav.count("<a ") == 2
        assert (
            '<a class="nav-link" routerLink="/register" routerLinkActive="active">Sign Up</a>'
            in nav
        )

    def test_custom_links(self, shell, example_spec, custom_layout):
        nav = shell.render_menu(example_spec.components, MenuType.VERTICAL, custom_layout)
        assert '<nav class="custom-vertical-menu">' in nav
        assert nav.count('class="custom-menu-link"') == 2

    def test_empty_is_fatal(self, shell, custom_layout):
        with pytest.raises(SpecificationError):
            shell.render_menu([], MenuType.HORIZONTAL, custom_layout)


class TestRenderFooter:
    @pytest.mark.parametrize("content", [None, ""])
    def test_absent_footer(self, shell, custom_layout, content):
        assert shell.render_footer(content, custom_layout) == ""

    def test_bootstrap_footer(self, shell, bootstrap_layout):
        assert shell.render_footer("(c) 2024", bootstrap_layout) == (
            '<footer class="mt-4 text-center">(c) 2024</footer>'
        )

    def test_custom_footer(self, shell, custom_layout):
        assert shell.render_footer("(c) 2024", custom_layout) == (
            '<footer class="custom-footer">(c) 2024</footer>'
        )


class TestRenderShell:
    def test_example_shell(self, shell, example_spec, bootstrap_layout):
        html = shell.render_shell(
            example_spec.components,
            example_spec.menu_type,
            example_spec.footer_content,
            bootstrap_layout,
        )
        assert html.count("routerLink=") == 2
        assert html.count("<router-outlet></router-outlet>") == 1
        assert '<footer class="mt-4 text-center">(c) 2024 My Angular App</footer>' in html
        assert html.index("<nav") < html.index("<router-outlet>") < html.index("<footer")
        assert '<main class="container mt-3">' in html

    def test_shell_without_footer(self, shell, example_spec, custom_layout):
        html = shell.render_shell(
            example_spec.components, MenuType.HORIZONTAL, None, custom_layout
        )
        assert "<footer" not in html
        assert '<main class="custom-content">' in html
        assert html.rstrip().endswith("</main>")


class TestRenderStyle:
    def test_bootstrap_style_is_empty(self, shell, bootstrap_layout):
        assert shell.render_style(MenuType.VERTICAL, bootstrap_layout).strip() == ""

    def test_vertical_menu_style(self, shell, custom_layout):
        css = shell.render_style(MenuType.VERTICAL, custom_layout)
        assert ".custom-vertical-menu {" in css
        assert "flex-direction: column;" in css
        assert "gap: 10px;" in css

    def test_horizontal_menu_style(self, shell):
        css = shell.render_style(MenuType.HORIZONTAL, LayoutOptions())
        assert ".custom-horizontal-menu {" in css
        assert "flex-direction: row;" in css
        assert "gap: 20px;" in css
