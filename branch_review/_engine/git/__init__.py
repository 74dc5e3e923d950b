from .analysis import review_branch, resolve_repo_path
from .engine import fetch_diff, fetch_all_diffs
from .files_controller import should_include_file, filter_files, list_changed_files
