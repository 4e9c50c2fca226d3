# ABOUTME: Backup utilities for client configuration files.
# ABOUTME: Handles timestamped backups with automatic retention cleanup (keep last 5 per client).
import logging
import re
import shutil
from datetime import datetime
from pathlib import Path

logger = logging.getLogger(__name__)

# Pattern matches: {client}_{YYYYMMDD}_{HHMMSS}.{ext}
# e.g., claude-desktop_20260108_143022.json
_BACKUP_PATTERN = re.compile(r"^(.+?)_(\d{8}_\d{6})\.(.+)$")


def client_slug(name: str) -> str:
    """Turn a client display name into a filename prefix.

    Examples:
        >>> client_slug("Visual Studio 2022")
        'visual-studio-2022'
        >>> client_slug("Continue.dev")
        'continue-dev'
    """
    slug = re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")
    return slug or "client"


def create_backup(source_path: Path, backup_dir: Path, client: str) -> Path:
    """Create a timestamped backup of a client config file.

    ABOUTME: Backup format: {client-slug}_{YYYYMMDD}_{HHMMSS}.{ext}
    ABOUTME: Uses shutil.copy2() to preserve file metadata
    ABOUTME: Creates backup_dir if it doesn't exist

    Args:
        source_path: Path to file to backup
        backup_dir: Directory where backup should be created
        client: Client display name, used for the filename prefix

    Returns:
        Path to created backup file

    Raises:
        FileNotFoundError: If source_path doesn't exist
        OSError: If backup creation fails

    Examples:
        >>> source = Path("~/.cursor/mcp.json").expanduser()
        >>> backup_dir = Path("~/.nia-wizard/backups").expanduser()
        >>> create_backup(source, backup_dir, "Cursor").name
        'cursor_20260108_143022.json'
    """
    if not source_path.exists():
        raise FileNotFoundError(f"Source file not found: {source_path}")

    backup_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    extension = source_path.suffix or ".bak"
    backup_path = backup_dir / f"{client_slug(client)}_{timestamp}{extension}"

    shutil.copy2(source_path, backup_path)
    logger.debug(f"Backed up {source_path} to {backup_path}")

    cleanup_old_backups(backup_dir)

    return backup_path


def cleanup_old_backups(backup_dir: Path, max_backups_per_client: int = 5) -> list[Path]:
    """Remove old backup files, keeping only the most recent per client.

    ABOUTME: Groups backups by client prefix (before _timestamp)
    ABOUTME: Sorts by timestamp descending (newest first)
    ABOUTME: Logs warnings on errors but does not raise exceptions

    Args:
        backup_dir: Directory containing backup files
        max_backups_per_client: Maximum backups to keep per client (default 5)

    Returns:
        List of paths that were deleted
    """
    deleted_files: list[Path] = []

    if not backup_dir.exists():
        return deleted_files

    backups_by_client: dict[str, list[tuple[str, Path]]] = {}

    for file_path in backup_dir.iterdir():
        if not file_path.is_file():
            continue

        match = _BACKUP_PATTERN.match(file_path.name)
        if not match:
            continue

        backups_by_client.setdefault(match.group(1), []).append((match.group(2), file_path))

    for backups in backups_by_client.values():
        backups.sort(key=lambda x: x[0], reverse=True)

        for _, file_path in backups[max_backups_per_client:]:
            try:
                file_path.unlink()
                deleted_files.append(file_path)
                logger.debug(f"Deleted old backup: {file_path}")
            except OSError as e:
                logger.warning(f"Failed to delete old backup {file_path}: {e}")

    return deleted_files
