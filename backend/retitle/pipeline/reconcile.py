"""
Retitle — Rename propagation.

The process record is the system of record: the new title is saved first,
then every immediate child directory of the images root that embeds the old
title is renamed to embed the new one.

Directories whose name already contains the new title are left alone, which
makes a repeated run a no-op. There is no rollback; a failed rename leaves
the saved title in place and the remaining folders for the next run.
"""

from __future__ import annotations

import os
from pathlib import Path

from retitle.errors import FilesystemError
from retitle.host.store import ProcessStore
from retitle.models.job import DirectoryRename, RenameJob
from retitle.models.process import ProcessRecord
from retitle.utils.logging import logger


def commit_title(process: ProcessRecord, new_title: str, store: ProcessStore) -> RenameJob:
    """
    Persist ``new_title``, then write it into the record. Always saves, even for an unchanged title.

    A failed save leaves ``process`` on its old title.
    """
    old_title = process.title
    store.save(process.model_copy(update={"title": new_title}))
    process.title = new_title
    logger.info("  Process %d retitled: %r → %r", process.id, old_title, new_title)
    return RenameJob(
        process_id=process.id,
        old_title=old_title,
        new_title=new_title,
        images_root=str(process.images_directory),
    )


def needs_rename(name: str, old_title: str, new_title: str) -> bool:
    return bool(old_title) and old_title in name and new_title not in name


def _list_child_dirs(root: Path) -> list[str]:
    try:
        with os.scandir(root) as entries:
            return [entry.name for entry in entries if entry.is_dir()]
    except FileNotFoundError:
        return []
    except OSError as exc:
        raise FilesystemError(str(root), exc.strerror or str(exc))


def reconcile_directories(job: RenameJob) -> list[DirectoryRename]:
    """
    Rename the child directories of ``job.images_root`` that embed the old title.

    A missing images root yields nothing. Raises FilesystemError on the first
    failed rename, including when the target name is already taken.
    """
    root = Path(job.images_root)
    renamed: list[DirectoryRename] = []

    for name in _list_child_dirs(root):
        if not needs_rename(name, job.old_title, job.new_title):
            continue

        target_name = name.replace(job.old_title, job.new_title)
        source = root / name
        target = root / target_name
        if target.exists():
            raise FilesystemError(str(target), "target already exists")
        try:
            source.rename(target)
        except OSError as exc:
            raise FilesystemError(str(source), exc.strerror or str(exc))

        logger.info("  Renamed folder: %s → %s", name, target_name)
        renamed.append(DirectoryRename(old_name=name, new_name=target_name))

    return renamed
