"""
Project file generator — starter file set for a new Expo app.

Builds an ordered FileSet from the templates, then renders it to one
markdown document with a fenced block per file. Nothing is written to disk.
"""

from string import Template

from models import FileSet, GeneratedFile, Router
from validation import sanitize_app_name, sanitize_features, slugify_app_name

from .templates import (
    COMMON_FILES,
    EXPO_ROUTER_FILES,
    REACT_NAVIGATION_FILES,
    STORE_FILES,
    API_FILES,
    ENV_FILES,
    CI_FILES,
)

ROUTER_FILES: dict[Router, tuple[tuple[str, str], ...]] = {
    Router.EXPO_ROUTER: EXPO_ROUTER_FILES,
    Router.REACT_NAVIGATION: REACT_NAVIGATION_FILES,
}

CLOSING_INSTRUCTIONS = """---

Після створення файлів:
```bash
npm install
npx expo start --clear
```
"""


def render_templates(
    templates: tuple[tuple[str, str], ...],
    app_name: str,
) -> tuple[GeneratedFile, ...]:
    """Substitute $app_name / $app_slug into each template body."""
    values = {"app_name": app_name, "app_slug": slugify_app_name(app_name)}
    return tuple(
        GeneratedFile(path=path, content=Template(body).safe_substitute(values))
        for path, body in templates
    )


def build_project_file_set(
    app_name: str,
    features: list[str] | None = None,
    include_ci: bool = False,
    include_env_setup: bool = True,
    router: Router = Router.EXPO_ROUTER,
) -> FileSet:
    """
    Assemble the starter files in emission order.

    Order: common, router-specific, store, API, env (optional), CI (optional).
    """
    name = sanitize_app_name(app_name)

    groups = [COMMON_FILES, ROUTER_FILES[router], STORE_FILES, API_FILES]
    if include_env_setup:
        groups.append(ENV_FILES)
    if include_ci:
        groups.append(CI_FILES)

    files: list[GeneratedFile] = []
    for group in groups:
        files.extend(render_templates(group, name))

    intro = "Створіть наступні файли у вашому проекті:"
    feature_names = sanitize_features(features)
    if feature_names:
        intro = f"Фічі: {', '.join(feature_names)}\n\n{intro}"

    return FileSet(
        title=f"Starter файли для {name} ({router.value})",
        intro=intro,
        files=tuple(files),
        closing=CLOSING_INSTRUCTIONS,
    )


def render_file(file: GeneratedFile) -> str:
    """Render one record as a '## path' heading and a fenced block."""
    return f"## {file.path}\n```{file.fence_language}\n{file.content}\n```"


def render_file_set(file_set: FileSet) -> str:
    """
    Render a file set as one markdown document.

    Returns:
        "# {title}\\n\\n{intro}\\n\\n{files}\\n\\n{closing}", files joined by
        blank lines. The closing part is omitted when empty.
    """
    body = "\n\n".join(render_file(f) for f in file_set.files)
    document = f"# {file_set.title}\n\n{file_set.intro}\n\n{body}\n"
    if file_set.closing:
        document += f"\n{file_set.closing}"
    return document


def generate_project_files(
    app_name: str,
    features: list[str] | None = None,
    include_ci: bool = False,
    include_env_setup: bool = True,
    router: Router = Router.EXPO_ROUTER,
) -> str:
    """
    Generate the starter file document for a new project.

    Args:
        app_name: App name, sanitised before interpolation
        features: Feature names, listed in the header
        include_ci: Append the GitHub Actions EAS workflow
        include_env_setup: Include env/ config files and the env switch script
        router: Navigation library the layout files target

    Returns:
        Markdown with one '## path' + fenced block per file, then the
        install/start commands. Identical inputs give identical output.
    """
    file_set = build_project_file_set(
        app_name,
        features=features,
        include_ci=include_ci,
        include_env_setup=include_env_setup,
        router=router,
    )
    return render_file_set(file_set)
