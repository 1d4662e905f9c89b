"""Project generation from the bundled stub files."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Callable, Mapping

from .commands import CommandRunner, SubprocessCommandRunner
from .config import CommandSettings, NameVariants
from .errors import DirectoryCreateError, UnknownLicense
from .exports import ExportIgnoreList
from .identity import GitIdentityProvider, Identity, IdentityProvider
from .naming import build_namespace
from .template import TemplateRenderer

__all__ = ["GenerationRun", "ProjectGenerator", "STUBS_DIR"]


LOGGER = logging.getLogger(__name__)

STUBS_DIR = Path(__file__).resolve().parent / "stubs"
SRC_PATH = "src"
TESTS_PATH = "tests"


@dataclass(slots=True)
class GenerationRun:
    """State accumulated while a single project is generated.

    Attributes
    ----------
    settings:
        The user's choices for this run.
    variants:
        Name spellings derived from :attr:`CommandSettings.project_name`.
    root:
        Directory of the generated project.
    ignores:
        Paths registered so far for the ``.gitattributes`` export-ignore list.
    testing_version:
        Composer constraint of the selected testing framework, set by the
        testing step.
    identity:
        Author identity, looked up on first use.
    """

    settings: CommandSettings
    variants: NameVariants
    root: Path
    ignores: ExportIgnoreList = field(default_factory=ExportIgnoreList)
    testing_version: str = ""
    identity: Identity | None = None


class ProjectGenerator:
    """Create a PHP package skeleton for a ``vendor/project`` name."""

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        *,
        identity: IdentityProvider | None = None,
        runner: CommandRunner | None = None,
        clock: Callable[[], date] | None = None,
        stubs_dir: str | Path | None = None,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.identity = identity or GitIdentityProvider()
        self.runner = runner or SubprocessCommandRunner()
        self.clock = clock or date.today
        self.stubs_dir = Path(stubs_dir) if stubs_dir is not None else STUBS_DIR

    def generate(self, settings: CommandSettings, directory: str | Path = ".") -> Path:
        """Generate the project described by ``settings`` inside ``directory``.

        The project lands in ``directory/<project>``, which must not exist yet.
        Steps run in a fixed order and stop at the first error; files written
        before the failure are left in place.
        """

        run = self.prepare(settings, directory)

        self.make_root(run)
        self.make_src(run)
        self.docs(run)
        self.testing(run)
        self.gitignore(run)

        if settings.with_lint_config:
            self.phpcs(run)

        self.travis(run)
        self.license(run)
        self.composer(run)
        self.project_class(run)
        self.project_test(run)

        self.gitattributes(run)
        self.composer_install(run)

        if settings.with_git_init:
            self.git_init(run)

        LOGGER.info("generated %s in %s", settings.project_name, run.root)
        return run.root

    def prepare(self, settings: CommandSettings, directory: str | Path = ".") -> GenerationRun:
        """Resolve the name variants and project root without touching disk."""

        variants = NameVariants.from_project_name(settings.project_name)
        root = Path(directory) / variants.project_lower
        return GenerationRun(settings=settings, variants=variants, root=root)

    # Directories

    def make_root(self, run: GenerationRun) -> None:
        _make_directory(run.root)

    def make_src(self, run: GenerationRun) -> None:
        _make_directory(run.root / SRC_PATH)

    # Files

    def docs(self, run: GenerationRun) -> None:
        """Write README, CONTRIBUTING and CHANGELOG."""

        readme = dict(run.variants.context(), license=run.settings.license)
        self._write(run, "README.md", "README.txt", readme)
        self._write(run, "CONTRIBUTING.md", "CONTRIBUTING.txt")
        changelog = {"creation_date": self.clock().isoformat()}
        self._write(run, "CHANGELOG.md", "CHANGELOG.txt", changelog)

    def testing(self, run: GenerationRun) -> None:
        """Apply the selected testing framework."""

        framework = run.settings.framework
        run.testing_version = framework.version
        LOGGER.debug("testing framework %s %s", framework.kind.value, framework.version)

        if framework.writes_config_file:
            tokens = {"project_upper": run.variants.project_studly}
            self._write(run, "phpunit.xml.dist", "phpunit.txt", tokens)

    def gitignore(self, run: GenerationRun) -> None:
        self._write(run, ".gitignore", "gitignore.txt")

    def phpcs(self, run: GenerationRun) -> None:
        self._write(run, ".php_cs", "phpcs.txt")

    def travis(self, run: GenerationRun) -> None:
        self._write(run, ".travis.yml", "travis.txt", {"testing": run.settings.testing_framework})

    def license(self, run: GenerationRun) -> None:
        licenses_dir = (self.stubs_dir / "licenses").resolve()
        candidate = (licenses_dir / f"{run.settings.license.lower()}.txt").resolve()
        if candidate.parent != licenses_dir or not candidate.is_file():
            raise UnknownLicense(run.settings.license)

        stub = f"licenses/{candidate.name}"
        tokens = {
            "year": self.clock().year,
            "author_name": self._author(run).name,
        }
        self._write(run, "LICENSE.md", stub, tokens)

    def composer(self, run: GenerationRun) -> None:
        """Write ``composer.json``; it ships with the package so it is not ignored."""

        author = self._author(run)
        tokens = dict(
            run.variants.context(),
            testing=run.settings.testing_framework,
            testing_version=run.testing_version,
            namespace=build_namespace(run.variants, run.settings, double_separator=True),
            license=run.settings.license,
            author_name=author.name,
            author_email=author.email,
        )
        self._write(run, "composer.json", "composer.txt", tokens, export_ignore=False)

    def project_class(self, run: GenerationRun) -> None:
        tokens = {
            "project_upper": run.variants.project_studly,
            "vendor_upper": run.variants.vendor_studly,
            "namespace": build_namespace(run.variants, run.settings),
        }
        relative = f"{SRC_PATH}/{run.variants.project_studly}.php"
        self._write(run, relative, "Project.txt", tokens, export_ignore=False)

    def project_test(self, run: GenerationRun) -> None:
        tokens = {
            "project_upper": run.variants.project_studly,
            "project_camel_case": run.variants.project_camel,
            "vendor_upper": run.variants.vendor_studly,
            "namespace": build_namespace(run.variants, run.settings),
        }
        _make_directory(run.root / TESTS_PATH)
        relative = f"{TESTS_PATH}/{run.variants.project_studly}Test.php"
        self._write(run, relative, "ProjectTest.txt", tokens, export_ignore=False)
        run.ignores.register(TESTS_PATH)

    def gitattributes(self, run: GenerationRun) -> None:
        """Write ``.gitattributes`` from every path registered so far."""

        run.ignores.register(".gitattributes")
        body = self.renderer.render_file(self.stubs_dir / "gitattributes.txt")
        destination = run.root / ".gitattributes"
        destination.write_text(run.ignores.render(body), encoding=self.renderer.encoding)
        LOGGER.debug("wrote %s", destination)

    # External tools

    def composer_install(self, run: GenerationRun) -> None:
        if run.root.is_dir():
            self.runner.run(run.root, ["composer", "install"])

    def git_init(self, run: GenerationRun) -> None:
        if run.root.is_dir():
            self.runner.run(run.root, ["git", "init"])

    # Helpers

    def _author(self, run: GenerationRun) -> Identity:
        if run.identity is None:
            run.identity = self.identity.current_user()
        return run.identity

    def _write(
        self,
        run: GenerationRun,
        relative_path: str,
        stub: str,
        tokens: Mapping[str, object] | None = None,
        *,
        export_ignore: bool = True,
    ) -> Path:
        destination = run.root / relative_path
        self.renderer.render_file(self.stubs_dir / stub, tokens, target=destination)
        LOGGER.debug("wrote %s", destination)
        if export_ignore:
            run.ignores.register(relative_path)
        return destination


def _make_directory(path: Path) -> None:
    try:
        path.mkdir()
    except FileExistsError as exc:
        raise DirectoryCreateError(path, "already exists") from exc
    except OSError as exc:
        raise DirectoryCreateError(path, exc.strerror or str(exc)) from exc
    LOGGER.info("created %s", path)
