"""Terminal command detection.

A query is treated as a shell command when its first word is a well known
command line tool, or when it starts with an explicit prompt marker
("> " or "$ "). The marker is not part of the command.
"""

from typing import Optional


TERMINAL_COMMANDS = frozenset({
    "ls", "cd", "pwd", "grep", "find", "cat", "less", "more", "mkdir",
    "rm", "cp", "mv", "chmod", "chown", "sudo", "git", "npm", "cargo",
    "python", "python3", "node", "yarn", "docker", "kubectl", "curl",
    "wget", "ssh", "scp", "htop", "top", "ping", "tail", "head", "make",
    "systemctl", "journalctl", "nix", "nix-shell", "rsync", "tar",
})

PROMPT_MARKERS = ("> ", "$ ")


def strip_prompt_marker(query: str) -> Optional[str]:
    """Return the command after a prompt marker, or None without a marker."""
    for marker in PROMPT_MARKERS:
        if query.startswith(marker):
            command = query[len(marker):].strip()
            return command or None
    return None


def looks_like_terminal_command(query: str) -> bool:
    """Return True when the (trimmed) query should run in a terminal."""
    if strip_prompt_marker(query) is not None:
        return True
    words = query.split()
    return bool(words) and words[0] in TERMINAL_COMMANDS


def terminal_command_text(query: str) -> str:
    """Command to run for a query accepted by looks_like_terminal_command."""
    command = strip_prompt_marker(query)
    return query if command is None else command
