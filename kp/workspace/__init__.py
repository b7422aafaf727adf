"""Files inside a contest workspace."""

from .contest import load_tasks, problem_dirs
from .manifest import add_bins, bin_entries
from .models import SampleCase, Task
from .samples import (
    add_url_comment,
    list_samples,
    load_sample,
    outputs_match,
    strip_bom,
)
from .settings import add_linked_project

__all__ = [
    "SampleCase",
    "Task",
    "add_bins",
    "add_linked_project",
    "add_url_comment",
    "bin_entries",
    "list_samples",
    "load_sample",
    "load_tasks",
    "outputs_match",
    "problem_dirs",
    "strip_bom",
]
