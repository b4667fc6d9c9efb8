from __future__ import annotations

from shared.contracts.v1.writer import WriterConfig

from .values import WireType

# gmetric [OPTIONS]
#   -c, --conf    gmond.conf used to find send channels
#   -n, --name    metric name
#   -v, --value   metric value
#   -t, --type    string|int8|uint8|int16|uint16|int32|uint32|float|double
#   -u, --units   unit of measure, e.g. Kilobytes, Celcius
#   -s, --slope   zero|positive|negative|both
#   -x, --tmax    max seconds between gmetric calls
#   -d, --dmax    lifetime in seconds of this metric (0 = unlimited)
#   -g, --group   group the metric belongs to

SubmissionCommand = tuple[str, ...]


def build_command(
    config: WriterConfig, name: str, value_text: str, wire_type: WireType | str
) -> SubmissionCommand:
    """Assemble the gmetric argv. Flag order is fixed."""
    type_token = wire_type.value if isinstance(wire_type, WireType) else str(wire_type)
    return (
        config.gmetric_path,
        "-c",
        config.gmond_config,
        "-n",
        name,
        "-v",
        value_text,
        "-t",
        type_token,
        "-u",
        config.units,
        "-s",
        config.slope.name,
        "-x",
        str(config.tmax),
        "-d",
        str(config.dmax),
        "-g",
        config.group_name or "",
    )
