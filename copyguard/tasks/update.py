from datetime import datetime
from pathlib import Path
from typing import Callable, Collection, Dict, List

from copyguard.changes import ChangeYearCollector, common_root
from copyguard.compliance import ComplianceChecker
from copyguard.config import UpdateCheckConfig
from copyguard.files import CopyrightSet, read_ignore_file
from copyguard.messages import error, info, success, warning
from copyguard.report import CopyrightViolationError, report_violations
from copyguard.vcs import GitGateway, VersionControl


def run_update_check(
    vcs: VersionControl,
    files: Collection[Path],
    config: UpdateCheckConfig | None = None,
    clock: Callable[[], datetime] = datetime.now,
) -> Dict[Path, int]:
    """
    Checks that every changed file in ``files`` states a current copyright year.

    Returns the expected years when all statements are correct, raises
    ``CopyrightViolationError`` naming every offending file otherwise.
    """
    config = config or UpdateCheckConfig()
    expected = ChangeYearCollector(vcs, config, clock).collect(files)
    report_violations(ComplianceChecker(config.matcher).violations(expected))
    return expected


def open_gateway(files: Collection[Path]) -> GitGateway:
    # fails on an empty or rootless file set before git is touched
    root = common_root(files)
    return GitGateway(root if root.is_dir() else root.parent)


def expected_years(
    files: Collection[Path],
    config: UpdateCheckConfig | None = None,
    clock: Callable[[], datetime] = datetime.now,
) -> Dict[Path, int]:
    with open_gateway(files) as vcs:
        return ChangeYearCollector(vcs, config, clock).collect(files)


def update_check(
    files: Collection[Path],
    config: UpdateCheckConfig | None = None,
    clock: Callable[[], datetime] = datetime.now,
) -> Dict[Path, int]:
    with open_gateway(files) as vcs:
        return run_update_check(vcs, files, config, clock)


##################################################################################################
# Console entry points
##################################################################################################

def candidate_files(paths: List[str], excludes: List[str], ignore_file: str | None) -> frozenset[Path]:
    copyright_set = CopyrightSet().check(*paths).exclude(*excludes)
    if ignore_file is not None:
        copyright_set.exclude(*read_ignore_file(Path(ignore_file)))
    return copyright_set.files


def update_main(paths: List[str], excludes: List[str] | None = None, ignore_file: str | None = None) -> bool:
    files = candidate_files(paths, excludes or [], ignore_file)
    if not files:
        warning("No files to check")
        return True

    info(f"Checking copyright years of {len(files)} files")

    try:
        expected = update_check(files)
    except CopyrightViolationError as e:
        error(str(e).rstrip())
        return False

    success(f"Copyright statements are up to date in {len(expected)} changed files")
    return True


def years_main(paths: List[str], excludes: List[str] | None = None, ignore_file: str | None = None) -> None:
    files = candidate_files(paths, excludes or [], ignore_file)
    if not files:
        warning("No files to check")
        return

    years = expected_years(files)
    if not years:
        info("No changed files")
        return

    for path, year in sorted(years.items()):
        info(f"{year} {path}")
