"""Reading of the current Kubernetes context and namespace."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from promptparts.utils import read_file


def get_kube_context(contents: str) -> tuple[str, str] | None:
    """Return (context, namespace) from kubeconfig text, or None if unset.

    The namespace is "" when the current context names none.
    """
    try:
        documents = list(yaml.safe_load_all(contents))
    except yaml.YAMLError:
        return None
    if not documents:
        return None
    conf = documents[0]
    if not isinstance(conf, dict):
        return None

    current = conf.get("current-context")
    if not isinstance(current, str) or not current:
        return None

    namespace = ""
    contexts = conf.get("contexts")
    if isinstance(contexts, list):
        match = next(
            (
                ctx
                for ctx in contexts
                if isinstance(ctx, dict)
                and isinstance(ctx.get("name"), str)
                and ctx["name"] == current
            ),
            None,
        )
        if match is not None:
            details = match.get("context")
            if isinstance(details, dict) and isinstance(details.get("namespace"), str):
                namespace = details["namespace"]

    return current, namespace


def read_kube_context(
    path: str | os.PathLike[str] | None = None,
) -> tuple[str, str] | None:
    """Read a kubeconfig file and return its current context and namespace.

    Without a path, $KUBECONFIG or ~/.kube/config is used.
    """
    if path is None:
        env_path = os.environ.get("KUBECONFIG")
        path = Path(env_path) if env_path is not None else Path.home() / ".kube" / "config"
    try:
        contents = read_file(path)
    except (OSError, ValueError):
        return None
    return get_kube_context(contents)