"""Systemd unit file rendering.

A unit is three sections rendered in a fixed order: [Unit], [Install],
[Service]. Within a section keys are sorted. A key holding several values
(Environment) is written once per value, in the order given.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from mkservice.config.models import ServiceConfig
from mkservice.service.errors import UnitFormatError

SERVICE_TYPE = "simple"
WANTED_BY = "multi-user.target"


@dataclass(frozen=True)
class Scalar:
    """A key bound to one value."""

    value: str


@dataclass(frozen=True)
class Multi:
    """A key repeated once per value."""

    values: tuple[str, ...]


UnitValue = Scalar | Multi

UnitSection = dict[str, UnitValue]


@dataclass
class SystemdUnit:
    """In-memory unit file."""

    unit: UnitSection = field(default_factory=dict)
    install: UnitSection = field(default_factory=dict)
    service: UnitSection = field(default_factory=dict)

    def sections(self) -> list[tuple[str, UnitSection]]:
        """Sections in the order they are written."""
        return [
            ("Unit", self.unit),
            ("Install", self.install),
            ("Service", self.service),
        ]


def systemd_quote(argv: Iterable[str]) -> str:
    """Quote a command line for ExecStart.

    Only double quotes are escaped. Backslashes, newlines and specifiers
    such as % pass through untouched.
    """
    return " ".join('"{}"'.format(arg.replace('"', '\\"')) for arg in argv)


def _check_token(kind: str, token: str) -> None:
    if not token or any(c in token for c in "[]=\r\n"):
        raise UnitFormatError(f"Invalid {kind} name: {token!r}")


def _section_lines(section: Mapping[str, UnitValue]) -> list[str]:
    lines = []
    for key in sorted(section):
        _check_token("key", key)
        value = section[key]
        if isinstance(value, Scalar):
            lines.append(f"{key}={value.value}")
        elif isinstance(value, Multi):
            lines.extend(f"{key}={v}" for v in value.values)
        else:
            raise UnitFormatError(f"Unsupported value for {key}: {value!r}")
    return lines


def serialize_unit(unit: SystemdUnit) -> str:
    """Serialize a unit to text with LF line endings.

    Raises:
        UnitFormatError: If a section or key name is malformed, or the
            result cannot be encoded as UTF-8.
    """
    lines: list[str] = []
    for name, section in unit.sections():
        _check_token("section", name)
        lines.append(f"[{name}]")
        lines.extend(_section_lines(section))
    # LF only, even for CR LF pairs embedded in values
    text = "".join(f"{line}\n" for line in lines).replace("\r\n", "\n")

    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise UnitFormatError(f"Unit is not valid UTF-8: {e}") from e
    return text


def build_unit(service: ServiceConfig) -> SystemdUnit:
    """Build the in-memory unit for a service."""
    service_section: UnitSection = {
        "Type": Scalar(SERVICE_TYPE),
        "ExecStart": Scalar(systemd_quote(service.command)),
    }
    if service.env:
        service_section["Environment"] = Multi(
            tuple(f"{k}={v}" for k, v in sorted(service.env.items()))
        )

    return SystemdUnit(
        unit={"Description": Scalar(service.name)},
        install={"WantedBy": Scalar(WANTED_BY)},
        service=service_section,
    )


def render(service: ServiceConfig) -> str:
    """Render the unit file text for a service."""
    return serialize_unit(build_unit(service))
