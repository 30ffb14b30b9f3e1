"""Filesystem failures raised while syncing a single template."""


class TemplateOperationError(Exception):
    """A file operation on one template failed.

    Carries the template's display name and the underlying ``OSError`` so the
    command layer can report both.
    """

    action = "process"

    def __init__(self, template_name: str, cause: BaseException):
        self.template_name = template_name
        self.cause = cause
        super().__init__(f"Failed to {self.action} {template_name}: {cause}")


class CopyFailed(TemplateOperationError):
    action = "copy"


class DeleteFailed(TemplateOperationError):
    action = "delete"


class ReadFailed(TemplateOperationError):
    action = "read"
