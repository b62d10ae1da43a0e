"""Command catalog offered by the permissions menu.

Defines the core types shared by the resolver, merger and display:
- RiskLevel: How risky it is to pre-approve a command
- EntryOrigin: Whether an entry came from the fixed catalog or user input
- CommandEntry: One selectable command
- Catalog: The immutable, index-addressed list of entries plus preset lists
"""

from __future__ import annotations

from collections.abc import Callable
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

MCP_PREFIX = "mcp__"
MCP_WILDCARD = "mcp__*"

# Number of leading catalog entries selected by the "common" preset
COMMON_COUNT = 40

DEV_COMMANDS = frozenset({"git", "npm", "yarn", "pip", "docker", "kubectl", "terraform", "ansible"})
SYSTEM_COMMANDS = frozenset({"systemctl", "service", "mount", "umount", "fdisk", "ifconfig", "ip", "netstat"})


class RiskLevel(str, Enum):
    """Risk of allowing a command without a prompt.

    Levels:
    - SAFE: Read-only or otherwise low impact
    - CAUTION: Can modify files, network or packages
    - DANGER: Can destroy data or reconfigure the system
    """

    SAFE = "safe"
    CAUTION = "caution"
    DANGER = "danger"


class EntryOrigin(str, Enum):
    CATALOG = "catalog"
    CUSTOM = "custom"


@dataclass(frozen=True)
class CommandEntry:
    """A selectable command.

    Attributes:
        name: Command name as it appears in the permission string
        description: One-line human description
        risk: Risk level used for coloring and the "safe" preset
        origin: Fixed catalog entry or ad-hoc custom entry
    """

    name: str
    description: str
    risk: RiskLevel = RiskLevel.CAUTION
    origin: EntryOrigin = EntryOrigin.CATALOG

    @classmethod
    def custom(cls, name: str) -> CommandEntry:
        """Build an entry from user-supplied text."""
        return cls(
            name=name,
            description=f"Custom command - {name}",
            risk=RiskLevel.CAUTION,
            origin=EntryOrigin.CUSTOM,
        )

    @property
    def is_wildcard_tool(self) -> bool:
        return self.name.startswith(MCP_PREFIX)


@dataclass(frozen=True)
class Catalog:
    """Immutable catalog of commands, addressed by 0-based index.

    Built once at startup and passed explicitly to whatever needs it.
    """

    entries: tuple[CommandEntry, ...]
    dev_commands: frozenset[str] = DEV_COMMANDS
    system_commands: frozenset[str] = SYSTEM_COMMANDS
    common_count: int = COMMON_COUNT

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, index: int) -> CommandEntry:
        return self.entries[index]

    def __iter__(self) -> Iterator[CommandEntry]:
        return iter(self.entries)

    def indices_where(self, predicate: Callable[[CommandEntry], bool]) -> list[int]:
        """Return indices of entries matching predicate, ascending."""
        return [index for index, entry in enumerate(self.entries) if predicate(entry)]


COMMANDS: tuple[CommandEntry, ...] = (
    CommandEntry("cd", "Change directory - navigate between folders", RiskLevel.SAFE),
    CommandEntry("ls", "List directory contents", RiskLevel.SAFE),
    CommandEntry("pwd", "Print working directory - show current location", RiskLevel.SAFE),
    CommandEntry("mkdir", "Create directories", RiskLevel.SAFE),
    CommandEntry("rmdir", "Remove empty directories", RiskLevel.CAUTION),
    CommandEntry("rm", "Remove files and directories", RiskLevel.DANGER),
    CommandEntry("cp", "Copy files and directories", RiskLevel.SAFE),
    CommandEntry("mv", "Move/rename files and directories", RiskLevel.CAUTION),
    CommandEntry("chmod", "Change file permissions", RiskLevel.CAUTION),
    CommandEntry("chown", "Change file ownership", RiskLevel.CAUTION),
    CommandEntry("find", "Search for files and directories", RiskLevel.SAFE),
    CommandEntry("grep", "Search text patterns in files", RiskLevel.SAFE),
    CommandEntry("cat", "Display file contents", RiskLevel.SAFE),
    CommandEntry("head", "Display first lines of files", RiskLevel.SAFE),
    CommandEntry("tail", "Display last lines of files", RiskLevel.SAFE),
    CommandEntry("less", "View file contents page by page", RiskLevel.SAFE),
    CommandEntry("more", "View file contents page by page", RiskLevel.SAFE),
    CommandEntry("touch", "Create empty files or update timestamps", RiskLevel.SAFE),
    CommandEntry("echo", "Display text", RiskLevel.SAFE),
    CommandEntry("which", "Locate command executable", RiskLevel.SAFE),
    CommandEntry("whoami", "Display current username", RiskLevel.SAFE),
    CommandEntry("date", "Display or set system date", RiskLevel.CAUTION),
    CommandEntry("ps", "Display running processes", RiskLevel.SAFE),
    CommandEntry("kill", "Terminate processes", RiskLevel.DANGER),
    CommandEntry("killall", "Terminate processes by name", RiskLevel.DANGER),
    CommandEntry("top", "Display running processes (live)", RiskLevel.SAFE),
    CommandEntry("htop", "Enhanced process viewer", RiskLevel.SAFE),
    CommandEntry("du", "Display disk usage", RiskLevel.SAFE),
    CommandEntry("df", "Display filesystem disk space usage", RiskLevel.SAFE),
    CommandEntry("free", "Display memory usage", RiskLevel.SAFE),
    CommandEntry("uptime", "Display system uptime", RiskLevel.SAFE),
    CommandEntry("uname", "Display system information", RiskLevel.SAFE),
    CommandEntry("id", "Display user and group IDs", RiskLevel.SAFE),
    CommandEntry("groups", "Display user groups", RiskLevel.SAFE),
    CommandEntry("history", "Display command history", RiskLevel.SAFE),
    CommandEntry("clear", "Clear terminal screen", RiskLevel.SAFE),
    CommandEntry("exit", "Exit shell", RiskLevel.SAFE),
    CommandEntry("logout", "Logout from shell", RiskLevel.SAFE),
    CommandEntry("ssh", "Secure shell remote connection", RiskLevel.CAUTION),
    CommandEntry("scp", "Secure copy files over network", RiskLevel.CAUTION),
    CommandEntry("rsync", "Synchronize files/directories", RiskLevel.CAUTION),
    CommandEntry("curl", "Transfer data from/to servers", RiskLevel.CAUTION),
    CommandEntry("wget", "Download files from web", RiskLevel.CAUTION),
    CommandEntry("tar", "Archive and compress files", RiskLevel.SAFE),
    CommandEntry("zip", "Create zip archives", RiskLevel.SAFE),
    CommandEntry("unzip", "Extract zip archives", RiskLevel.SAFE),
    CommandEntry("gzip", "Compress files", RiskLevel.SAFE),
    CommandEntry("gunzip", "Decompress gzip files", RiskLevel.SAFE),
    CommandEntry("sort", "Sort lines in text files", RiskLevel.SAFE),
    CommandEntry("uniq", "Remove duplicate lines", RiskLevel.SAFE),
    CommandEntry("wc", "Count lines, words, characters", RiskLevel.SAFE),
    CommandEntry("diff", "Compare files line by line", RiskLevel.SAFE),
    CommandEntry("patch", "Apply differences to files", RiskLevel.CAUTION),
    CommandEntry("vim", "Text editor", RiskLevel.SAFE),
    CommandEntry("nano", "Simple text editor", RiskLevel.SAFE),
    CommandEntry("emacs", "Text editor", RiskLevel.SAFE),
    CommandEntry("git", "Version control system", RiskLevel.SAFE),
    CommandEntry("npm", "Node.js package manager", RiskLevel.CAUTION),
    CommandEntry("yarn", "Alternative Node.js package manager", RiskLevel.CAUTION),
    CommandEntry("pip", "Python package manager", RiskLevel.CAUTION),
    CommandEntry("brew", "macOS package manager", RiskLevel.CAUTION),
    CommandEntry("apt", "Debian/Ubuntu package manager", RiskLevel.DANGER),
    CommandEntry("yum", "Red Hat package manager", RiskLevel.DANGER),
    CommandEntry("dnf", "Fedora package manager", RiskLevel.DANGER),
    CommandEntry("pacman", "Arch Linux package manager", RiskLevel.DANGER),
    CommandEntry("docker", "Container platform", RiskLevel.CAUTION),
    CommandEntry("kubectl", "Kubernetes command-line tool", RiskLevel.CAUTION),
    CommandEntry("terraform", "Infrastructure as code", RiskLevel.CAUTION),
    CommandEntry("ansible", "Configuration management", RiskLevel.CAUTION),
    CommandEntry("systemctl", "Control systemd services", RiskLevel.DANGER),
    CommandEntry("service", "Control system services", RiskLevel.DANGER),
    CommandEntry("crontab", "Schedule tasks", RiskLevel.CAUTION),
    CommandEntry("at", "Schedule one-time tasks", RiskLevel.CAUTION),
    CommandEntry("nohup", "Run commands immune to hangups", RiskLevel.SAFE),
    CommandEntry("screen", "Terminal multiplexer", RiskLevel.SAFE),
    CommandEntry("tmux", "Terminal multiplexer", RiskLevel.SAFE),
    CommandEntry("jobs", "Display active jobs", RiskLevel.SAFE),
    CommandEntry("bg", "Put jobs in background", RiskLevel.SAFE),
    CommandEntry("fg", "Bring jobs to foreground", RiskLevel.SAFE),
    CommandEntry("mount", "Mount filesystems", RiskLevel.DANGER),
    CommandEntry("umount", "Unmount filesystems", RiskLevel.DANGER),
    CommandEntry("fdisk", "Manage disk partitions", RiskLevel.DANGER),
    CommandEntry("lsblk", "List block devices", RiskLevel.SAFE),
    CommandEntry("lsusb", "List USB devices", RiskLevel.SAFE),
    CommandEntry("lspci", "List PCI devices", RiskLevel.SAFE),
    CommandEntry("ifconfig", "Configure network interface", RiskLevel.DANGER),
    CommandEntry("ip", "Show/manipulate routing, network devices", RiskLevel.DANGER),
    CommandEntry("netstat", "Display network connections", RiskLevel.SAFE),
    CommandEntry("ss", "Display socket statistics", RiskLevel.SAFE),
    CommandEntry("ping", "Send ICMP echo requests", RiskLevel.SAFE),
    CommandEntry("traceroute", "Trace network route", RiskLevel.SAFE),
    CommandEntry("nslookup", "Query DNS servers", RiskLevel.SAFE),
    CommandEntry("dig", "DNS lookup utility", RiskLevel.SAFE),
    CommandEntry("awk", "Text processing tool", RiskLevel.SAFE),
    CommandEntry("sed", "Stream editor for filtering and transforming text", RiskLevel.CAUTION),
    CommandEntry("tr", "Translate or delete characters", RiskLevel.SAFE),
    CommandEntry("cut", "Extract columns from text", RiskLevel.SAFE),
    CommandEntry("paste", "Merge lines of files", RiskLevel.SAFE),
    CommandEntry("xargs", "Build and execute command lines", RiskLevel.CAUTION),
    CommandEntry("tee", "Write output to multiple destinations", RiskLevel.SAFE),
    CommandEntry("ln", "Create links between files", RiskLevel.CAUTION),
    CommandEntry("stat", "Display file or filesystem status", RiskLevel.SAFE),
    CommandEntry("file", "Determine file type", RiskLevel.SAFE),
    CommandEntry("basename", "Extract filename from path", RiskLevel.SAFE),
    CommandEntry("dirname", "Extract directory from path", RiskLevel.SAFE),
    CommandEntry("readlink", "Display symbolic link target", RiskLevel.SAFE),
    CommandEntry("env", "Display or set environment variables", RiskLevel.SAFE),
    CommandEntry("export", "Set environment variables", RiskLevel.CAUTION),
    CommandEntry("alias", "Create command aliases", RiskLevel.SAFE),
    CommandEntry("unalias", "Remove command aliases", RiskLevel.SAFE),
    CommandEntry("type", "Display command type", RiskLevel.SAFE),
    CommandEntry("help", "Display help for built-in commands", RiskLevel.SAFE),
    CommandEntry("man", "Display manual pages", RiskLevel.SAFE),
    CommandEntry("info", "Display info documents", RiskLevel.SAFE),
    CommandEntry("apropos", "Search manual page names", RiskLevel.SAFE),
    CommandEntry("locate", "Find files by name", RiskLevel.SAFE),
    CommandEntry("updatedb", "Update locate database", RiskLevel.CAUTION),
    CommandEntry("cpio", "Copy files to/from archives", RiskLevel.CAUTION),
    CommandEntry("dd", "Convert and copy files", RiskLevel.DANGER),
    CommandEntry("sync", "Flush filesystem buffers", RiskLevel.CAUTION),
    CommandEntry("fsck", "Check and repair filesystems", RiskLevel.DANGER),
    CommandEntry("mkfs", "Create filesystems", RiskLevel.DANGER),
    CommandEntry("mcp__*", "All MCP tools - Global permission for all MCP servers", RiskLevel.SAFE),
)


def default_catalog() -> Catalog:
    """Return the built-in command catalog."""
    return Catalog(entries=COMMANDS)
