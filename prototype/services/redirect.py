"""Redirect target rewriting for version-mounted sub-applications."""


def is_path_absolute(target: str) -> bool:
    return target.startswith("/")


def rewrite_target(target: str, mount_prefix: str) -> str:
    """Keep a redirect inside the current version mount.

    Path-absolute targets (``/question-2``) get *mount_prefix* prepended;
    anything else (full URLs, relative references, the empty string) is
    returned untouched. An empty prefix makes this a no-op.
    """
    if is_path_absolute(target):
        return mount_prefix + target
    return target
