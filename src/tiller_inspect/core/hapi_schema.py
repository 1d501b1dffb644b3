"""Protobuf message classes for the Helm v2 ``hapi`` release schema.

Tiller serializes ``hapi.release.Release`` messages into its storage objects.
Only the fields needed to inspect a release are declared here; anything else
on the wire (hooks, config value maps, test suite runs) is kept as unknown
fields by the parser. Field numbers match the upstream ``hapi`` protos.
"""

from __future__ import annotations

from google.protobuf import descriptor_pb2, descriptor_pool, timestamp_pb2
from google.protobuf.message_factory import GetMessageClass

_F = descriptor_pb2.FieldDescriptorProto

STATUS_CODES: dict[str, int] = {
    "UNKNOWN": 0,
    "DEPLOYED": 1,
    "DELETED": 2,
    "SUPERSEDED": 3,
    "FAILED": 4,
    "DELETING": 5,
    "PENDING_INSTALL": 6,
    "PENDING_UPGRADE": 7,
    "PENDING_ROLLBACK": 8,
}


def _string(name: str, number: int, repeated: bool = False) -> _F:
    label = _F.LABEL_REPEATED if repeated else _F.LABEL_OPTIONAL
    return _F(name=name, number=number, type=_F.TYPE_STRING, label=label)


def _scalar(name: str, number: int, field_type: int) -> _F:
    return _F(name=name, number=number, type=field_type, label=_F.LABEL_OPTIONAL)


def _message(name: str, number: int, type_name: str, repeated: bool = False) -> _F:
    label = _F.LABEL_REPEATED if repeated else _F.LABEL_OPTIONAL
    return _F(name=name, number=number, type=_F.TYPE_MESSAGE, label=label, type_name=type_name)


def _chart_file() -> descriptor_pb2.FileDescriptorProto:
    fdp = descriptor_pb2.FileDescriptorProto(
        name="hapi/chart/chart.proto", package="hapi.chart", syntax="proto3",
    )
    fdp.message_type.add(name="Maintainer", field=[
        _string("name", 1),
        _string("email", 2),
        _string("url", 3),
    ])
    fdp.message_type.add(name="Metadata", field=[
        _string("name", 1),
        _string("home", 2),
        _string("sources", 3, repeated=True),
        _string("version", 4),
        _string("description", 5),
        _string("keywords", 6, repeated=True),
        _message("maintainers", 7, ".hapi.chart.Maintainer", repeated=True),
        _string("engine", 8),
        _string("icon", 9),
        _string("apiVersion", 10),
        _string("condition", 11),
        _string("tags", 12),
        _string("appVersion", 13),
        _scalar("deprecated", 14, _F.TYPE_BOOL),
        _string("tillerVersion", 15),
        _string("kubeVersion", 17),
    ])
    fdp.message_type.add(name="Config", field=[_string("raw", 1)])
    fdp.message_type.add(name="Template", field=[
        _string("name", 1),
        _scalar("data", 2, _F.TYPE_BYTES),
    ])
    fdp.message_type.add(name="Chart", field=[
        _message("metadata", 1, ".hapi.chart.Metadata"),
        _message("dependencies", 2, ".hapi.chart.Chart", repeated=True),
        _message("values", 3, ".hapi.chart.Config"),
        _message("templates", 4, ".hapi.chart.Template", repeated=True),
    ])
    return fdp


def _release_file() -> descriptor_pb2.FileDescriptorProto:
    fdp = descriptor_pb2.FileDescriptorProto(
        name="hapi/release/release.proto",
        package="hapi.release",
        syntax="proto3",
        dependency=["google/protobuf/timestamp.proto", "hapi/chart/chart.proto"],
    )
    status = fdp.message_type.add(name="Status", field=[
        _F(name="code", number=1, type=_F.TYPE_ENUM, label=_F.LABEL_OPTIONAL,
           type_name=".hapi.release.Status.Code"),
        _string("resources", 3),
        _string("notes", 4),
    ])
    code = status.enum_type.add(name="Code")
    for name, number in STATUS_CODES.items():
        code.value.add(name=name, number=number)

    fdp.message_type.add(name="Info", field=[
        _message("status", 1, ".hapi.release.Status"),
        _message("first_deployed", 2, ".google.protobuf.Timestamp"),
        _message("last_deployed", 3, ".google.protobuf.Timestamp"),
        _message("deleted", 4, ".google.protobuf.Timestamp"),
        _string("Description", 5),
    ])
    fdp.message_type.add(name="Release", field=[
        _string("name", 1),
        _message("info", 2, ".hapi.release.Info"),
        _message("chart", 3, ".hapi.chart.Chart"),
        _message("config", 4, ".hapi.chart.Config"),
        _string("manifest", 5),
        _scalar("version", 7, _F.TYPE_INT32),
        _string("namespace", 8),
    ])
    return fdp


_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(timestamp_pb2.DESCRIPTOR.serialized_pb)
_pool.AddSerializedFile(_chart_file().SerializeToString())
_pool.AddSerializedFile(_release_file().SerializeToString())

Timestamp = GetMessageClass(_pool.FindMessageTypeByName("google.protobuf.Timestamp"))
Maintainer = GetMessageClass(_pool.FindMessageTypeByName("hapi.chart.Maintainer"))
Metadata = GetMessageClass(_pool.FindMessageTypeByName("hapi.chart.Metadata"))
Config = GetMessageClass(_pool.FindMessageTypeByName("hapi.chart.Config"))
Chart = GetMessageClass(_pool.FindMessageTypeByName("hapi.chart.Chart"))
Status = GetMessageClass(_pool.FindMessageTypeByName("hapi.release.Status"))
Info = GetMessageClass(_pool.FindMessageTypeByName("hapi.release.Info"))
Release = GetMessageClass(_pool.FindMessageTypeByName("hapi.release.Release"))

_STATUS_NAMES = {number: name for name, number in STATUS_CODES.items()}


def status_code_name(code: int) -> str:
    """Return the enum name for a status code, or the number itself if unknown."""
    return _STATUS_NAMES.get(code, str(code))
