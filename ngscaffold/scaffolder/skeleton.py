"""Base project skeleton strategies.

The orchestrator does not care how the Angular workspace around the generated
files comes to exist.  A strategy contributes either external commands
(``CliSkeletonStrategy`` runs the Angular CLI and npm) or the skeleton files
themselves (``DirectSkeletonStrategy``).
"""

from __future__ import annotations

import json
from typing import Any

from ngscaffold.config import LayoutOptions
from ngscaffold.parser.models import Specification

from .artifacts import Artifact, InvocationPurpose, ToolInvocation
from .naming import label_form
from .templates import TemplateRenderer

ANGULAR_VERSION = "^17.3.0"
BOOTSTRAP_PACKAGE = "bootstrap"
BOOTSTRAP_VERSION = "^5.3.3"


class SkeletonStrategy:
    """Produces the base workspace. Subclasses override one or both hooks."""

    name = "none"

    def invocations(self, spec: Specification, layout: LayoutOptions) -> list[ToolInvocation]:
        """External commands creating the workspace, in execution order."""
        return []

    def artifacts(self, spec: Specification, layout: LayoutOptions) -> list[Artifact]:
        """Skeleton files written alongside the generated artifacts."""
        return []


class CliSkeletonStrategy(SkeletonStrategy):
    """Creates the workspace with ``ng new`` and installs packages with npm."""

    name = "cli"

    def __init__(
        self,
        cli_package: str = "@angular/cli@17",
        install_dependencies: bool = True,
    ) -> None:
        self.cli_package = cli_package
        self.install_dependencies = install_dependencies

    def invocations(self, spec: Specification, layout: LayoutOptions) -> list[ToolInvocation]:
        project = spec.project_name
        commands = [
            ToolInvocation(
                argv=[
                    "npx", "--yes", self.cli_package, "new", project,
                    "--skip-install", "--skip-git", "--routing", "--style=css",
                    "--standalone=false", "--defaults",
                ],
                cwd=".",
                purpose=InvocationPurpose.SKELETON,
                description=f"Create Angular workspace '{project}'",
            ),
        ]
        if self.install_dependencies:
            commands.append(ToolInvocation(
                argv=["npm", "install"],
                cwd=project,
                purpose=InvocationPurpose.DEPENDENCIES,
                description="Install workspace dependencies",
            ))
        if layout.use_bootstrap:
            commands.append(_bootstrap_install(project))
        return commands


class DirectSkeletonStrategy(SkeletonStrategy):
    """Writes a minimal NgModule-based workspace without running the CLI.

    Bootstrap is declared in ``package.json`` rather than installed, so the
    only command left to the user is ``npm install``.
    """

    name = "direct"

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def artifacts(self, spec: Specification, layout: LayoutOptions) -> list[Artifact]:
        project = spec.project_name
        context = {
            "project_name": project,
            "project_title": label_form(project.replace("-", " ")),
        }
        return [
            Artifact(path="package.json", content=_to_json(_package_json(project, layout))),
            Artifact(path="angular.json", content=_to_json(_angular_json(project))),
            Artifact(path="tsconfig.json", content=_to_json(_TSCONFIG)),
            Artifact(path="tsconfig.app.json", content=_to_json(_TSCONFIG_APP)),
            Artifact(
                path="src/index.html",
                content=self.renderer.render("skeleton/index.html.j2", context),
            ),
            Artifact(
                path="src/main.ts",
                content=self.renderer.render("skeleton/main.ts.j2", context),
            ),
            Artifact(
                path="src/app/app.component.ts",
                content=self.renderer.render("skeleton/app.component.ts.j2", context),
            ),
        ]


def _bootstrap_install(project: str) -> ToolInvocation:
    return ToolInvocation(
        argv=["npm", "install", BOOTSTRAP_PACKAGE],
        cwd=project,
        purpose=InvocationPurpose.STYLING,
        description="Install Bootstrap styling",
    )


# ---------------------------------------------------------------------------
# Workspace file contents
# ---------------------------------------------------------------------------

def _to_json(data: dict[str, Any]) -> str:
    return json.dumps(data, indent=2) + "\n"


def _package_json(project: str, layout: LayoutOptions) -> dict[str, Any]:
    dependencies = {
        f"@angular/{pkg}": ANGULAR_VERSION
        for pkg in (
            "animations", "common", "compiler", "core", "forms",
            "platform-browser", "platform-browser-dynamic", "router",
        )
    }
    dependencies.update({"rxjs": "~7.8.0", "tslib": "^2.3.0", "zone.js": "~0.14.3"})
    if layout.use_bootstrap:
        dependencies[BOOTSTRAP_PACKAGE] = BOOTSTRAP_VERSION
    return {
        "name": project,
        "version": "0.0.0",
        "private": True,
        "scripts": {
            "ng": "ng",
            "start": "ng serve",
            "build": "ng build",
        },
        "dependencies": dependencies,
        "devDependencies": {
            "@angular-devkit/build-angular": ANGULAR_VERSION,
            "@angular/cli": ANGULAR_VERSION,
            "@angular/compiler-cli": ANGULAR_VERSION,
            "typescript": "~5.4.2",
        },
    }


def _angular_json(project: str) -> dict[str, Any]:
    return {
        "$schema": "./node_modules/@angular/cli/lib/config/schema.json",
        "version": 1,
        "newProjectRoot": "projects",
        "projects": {
            project: {
                "projectType": "application",
                "root": "",
                "sourceRoot": "src",
                "prefix": "app",
                "architect": {
                    "build": {
                        "builder": "@angular-devkit/build-angular:browser",
                        "options": {
                            "outputPath": f"dist/{project}",
                            "index": "src/index.html",
                            "main": "src/main.ts",
                            "polyfills": ["zone.js"],
                            "tsConfig": "tsconfig.app.json",
                            "styles": ["src/styles.css"],
                        },
                    },
                    "serve": {
                        "builder": "@angular-devkit/build-angular:dev-server",
                        "options": {"buildTarget": f"{project}:build"},
                    },
                },
            },
        },
    }


_TSCONFIG: dict[str, Any] = {
    "compileOnSave": False,
    "compilerOptions": {
        "outDir": "./dist/out-tsc",
        "strict": True,
        "sourceMap": True,
        "declaration": False,
        "experimentalDecorators": True,
        "moduleResolution": "node",
        "importHelpers": True,
        "target": "ES2022",
        "module": "ES2022",
        "useDefineForClassFields": False,
        "lib": ["ES2022", "dom"],
    },
}

_TSCONFIG_APP: dict[str, Any] = {
    "extends": "./tsconfig.json",
    "compilerOptions": {"outDir": "./out-tsc/app", "types": []},
    "files": ["src/main.ts"],
    "include": ["src/**/*.d.ts"],
}
