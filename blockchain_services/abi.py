"""EOSIO ``abi_def`` model and its binary packing for the ``setabi`` action."""
from dataclasses import dataclass
from typing import Any, Dict, List

from aioeos import serializer
from aioeos.types import AbiBytes, BaseAbiObject, Name, UInt16, UInt64

# Field annotations stay real types: the aioeos serializer reads them at runtime.


@dataclass
class AbiTypeDef(BaseAbiObject):
    new_type_name: str
    type: str


@dataclass
class AbiField(BaseAbiObject):
    name: str
    type: str


@dataclass
class AbiStruct(BaseAbiObject):
    name: str
    base: str
    fields: List[AbiField]


@dataclass
class AbiActionDef(BaseAbiObject):
    name: Name
    type: str
    ricardian_contract: str


@dataclass
class AbiTable(BaseAbiObject):
    name: Name
    index_type: str
    key_names: List[str]
    key_types: List[str]
    type: str


@dataclass
class AbiClause(BaseAbiObject):
    id: str
    body: str


@dataclass
class AbiErrorMessage(BaseAbiObject):
    error_code: UInt64
    error_msg: str


@dataclass
class AbiExtension(BaseAbiObject):
    tag: UInt16
    value: AbiBytes


@dataclass
class AbiVariant(BaseAbiObject):
    name: str
    types: List[str]


@dataclass
class AbiActionResult(BaseAbiObject):
    name: Name
    result_type: str


@dataclass
class AbiDef(BaseAbiObject):
    version: str
    types: List[AbiTypeDef]
    structs: List[AbiStruct]
    actions: List[AbiActionDef]
    tables: List[AbiTable]
    ricardian_clauses: List[AbiClause]
    error_messages: List[AbiErrorMessage]
    abi_extensions: List[AbiExtension]


def abi_from_json(abi: Dict[str, Any]) -> AbiDef:
    """Build the fixed part of ``abi_def`` from an ABI JSON document."""
    return AbiDef(
        version=abi.get("version", "eosio::abi/1.1"),
        types=[AbiTypeDef(t["new_type_name"], t["type"]) for t in abi.get("types", [])],
        structs=[
            AbiStruct(
                s["name"],
                s.get("base", ""),
                [AbiField(f["name"], f["type"]) for f in s.get("fields", [])],
            )
            for s in abi.get("structs", [])
        ],
        actions=[
            AbiActionDef(a["name"], a["type"], a.get("ricardian_contract", ""))
            for a in abi.get("actions", [])
        ],
        tables=[
            AbiTable(
                t["name"],
                t.get("index_type", "i64"),
                list(t.get("key_names", [])),
                list(t.get("key_types", [])),
                t["type"],
            )
            for t in abi.get("tables", [])
        ],
        ricardian_clauses=[
            AbiClause(c["id"], c["body"]) for c in abi.get("ricardian_clauses", [])
        ],
        error_messages=[
            AbiErrorMessage(int(e["error_code"]), e["error_msg"])
            for e in abi.get("error_messages", [])
        ],
        abi_extensions=[
            AbiExtension(int(x["tag"]), bytes.fromhex(x.get("value", "")))
            for x in abi.get("abi_extensions", [])
        ],
    )


def pack_abi(abi: Dict[str, Any]) -> bytes:
    """Serialize an ABI JSON document into the binary ``abi_def`` layout.

    Binary extensions (``variants``, ``action_results``) are appended only when
    present; ``variants`` is written empty when only ``action_results`` is set.
    """
    packed = serializer.serialize(abi_from_json(abi))

    variants = abi.get("variants")
    action_results = abi.get("action_results")

    if variants is not None or action_results is not None:
        packed += serializer.serialize(
            [AbiVariant(v["name"], list(v.get("types", []))) for v in variants or []],
            List[AbiVariant],
        )

    if action_results is not None:
        packed += serializer.serialize(
            [AbiActionResult(r["name"], r["result_type"]) for r in action_results],
            List[AbiActionResult],
        )

    return packed
