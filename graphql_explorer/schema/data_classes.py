"""Data classes for GraphQL schema introspection and search."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

INTERNAL_TYPE_PREFIX = "__"


class TypeKind(str, Enum):
    """GraphQL ``__TypeKind`` values."""

    SCALAR = "SCALAR"
    OBJECT = "OBJECT"
    INTERFACE = "INTERFACE"
    UNION = "UNION"
    ENUM = "ENUM"
    INPUT_OBJECT = "INPUT_OBJECT"
    LIST = "LIST"
    NON_NULL = "NON_NULL"

    @property
    def is_wrapping(self) -> bool:
        return self in (TypeKind.LIST, TypeKind.NON_NULL)


# Members each named kind carries in an introspection response
KIND_MEMBERS = {
    TypeKind.SCALAR: frozenset(),
    TypeKind.OBJECT: frozenset({"fields", "interfaces"}),
    TypeKind.INTERFACE: frozenset({"fields", "interfaces", "possibleTypes"}),
    TypeKind.UNION: frozenset({"possibleTypes"}),
    TypeKind.ENUM: frozenset({"enumValues"}),
    TypeKind.INPUT_OBJECT: frozenset({"inputFields"}),
}


def is_internal_type(name: Optional[str]) -> bool:
    """Check whether a type name belongs to the introspection system."""
    return bool(name) and name.startswith(INTERNAL_TYPE_PREFIX)


@dataclass
class TypeRef:
    """Reference to a type, possibly wrapped in NON_NULL/LIST."""

    kind: TypeKind
    name: Optional[str] = None
    of_type: Optional["TypeRef"] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TypeRef":
        kind = TypeKind(data["kind"])
        of_type = data.get("ofType")
        return cls(
            kind=kind,
            name=data.get("name"),
            # ofType only survives on wrapping kinds
            of_type=cls.from_dict(of_type) if of_type and kind.is_wrapping else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"kind": self.kind.value, "name": self.name}
        if self.kind.is_wrapping:
            data["ofType"] = self.of_type.to_dict() if self.of_type else None
        return data

    def named_type(self) -> Optional[str]:
        """Name of the innermost named type, if the unwrap depth reached it."""
        ref: Optional[TypeRef] = self
        while ref is not None:
            if not ref.kind.is_wrapping:
                return ref.name
            ref = ref.of_type
        return None

    def to_signature(self) -> str:
        """Render in SDL notation, e.g. ``[String!]!``."""
        if self.kind == TypeKind.NON_NULL:
            inner = self.of_type.to_signature() if self.of_type else "?"
            return f"{inner}!"
        if self.kind == TypeKind.LIST:
            inner = self.of_type.to_signature() if self.of_type else "?"
            return f"[{inner}]"
        return self.name or "?"


@dataclass
class ArgDescriptor:
    """Field argument or input-object field."""

    name: str
    type: TypeRef
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ArgDescriptor":
        return cls(
            name=data["name"],
            type=TypeRef.from_dict(data["type"]),
            description=data.get("description"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "description": self.description, "type": self.type.to_dict()}


@dataclass
class FieldDescriptor:
    """Output field of an object or interface type."""

    name: str
    type: TypeRef
    description: Optional[str] = None
    args: List[ArgDescriptor] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FieldDescriptor":
        return cls(
            name=data["name"],
            type=TypeRef.from_dict(data["type"]),
            description=data.get("description"),
            args=[ArgDescriptor.from_dict(a) for a in data.get("args") or []],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "args": [a.to_dict() for a in self.args],
            "type": self.type.to_dict(),
        }


@dataclass
class EnumValueDescriptor:
    """Single value of an enum type."""

    name: str
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EnumValueDescriptor":
        return cls(name=data["name"], description=data.get("description"))

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "description": self.description}


@dataclass
class TypeDescriptor:
    """
    Full shape of one named type, tagged by its kind.

    Only the members listed in ``KIND_MEMBERS`` for the kind are populated;
    the others stay ``None`` regardless of what the upstream sent.
    """

    name: str
    kind: TypeKind
    description: Optional[str] = None
    fields: Optional[List[FieldDescriptor]] = None
    input_fields: Optional[List[ArgDescriptor]] = None
    interfaces: Optional[List[str]] = None
    enum_values: Optional[List[EnumValueDescriptor]] = None
    possible_types: Optional[List[str]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TypeDescriptor":
        kind = TypeKind(data["kind"])
        members = KIND_MEMBERS.get(kind, frozenset())

        def _member(key: str) -> Optional[List[Dict[str, Any]]]:
            if key not in members:
                return None
            return data.get(key) or []

        fields = _member("fields")
        input_fields = _member("inputFields")
        interfaces = _member("interfaces")
        enum_values = _member("enumValues")
        possible_types = _member("possibleTypes")

        return cls(
            name=data["name"],
            kind=kind,
            description=data.get("description"),
            fields=[FieldDescriptor.from_dict(f) for f in fields] if fields is not None else None,
            input_fields=[ArgDescriptor.from_dict(f) for f in input_fields] if input_fields is not None else None,
            interfaces=[i["name"] for i in interfaces] if interfaces is not None else None,
            enum_values=[EnumValueDescriptor.from_dict(v) for v in enum_values] if enum_values is not None else None,
            possible_types=[p["name"] for p in possible_types] if possible_types is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize back to the introspection ``__type`` shape."""
        return {
            "name": self.name,
            "kind": self.kind.value,
            "description": self.description,
            "fields": [f.to_dict() for f in self.fields] if self.fields is not None else None,
            "inputFields": [f.to_dict() for f in self.input_fields] if self.input_fields is not None else None,
            "interfaces": [{"name": n} for n in self.interfaces] if self.interfaces is not None else None,
            "enumValues": [v.to_dict() for v in self.enum_values] if self.enum_values is not None else None,
            "possibleTypes": (
                [{"name": n} for n in self.possible_types] if self.possible_types is not None else None
            ),
        }


@dataclass
class TypeSummary:
    """Entry of the flat schema type list."""

    name: str
    kind: str
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "kind": self.kind, "description": self.description}


@dataclass
class SchemaOverview:
    """Root operation type names plus the flat list of all named types."""

    query_type_name: Optional[str]
    types: List[TypeSummary]
    mutation_type_name: Optional[str] = None
    subscription_type_name: Optional[str] = None

    @classmethod
    def from_dict(cls, schema: Dict[str, Any]) -> "SchemaOverview":
        """Build from the ``__schema`` object of an introspection response."""

        def _root_name(key: str) -> Optional[str]:
            return (schema.get(key) or {}).get("name")

        return cls(
            query_type_name=_root_name("queryType"),
            mutation_type_name=_root_name("mutationType"),
            subscription_type_name=_root_name("subscriptionType"),
            types=[
                TypeSummary(name=t["name"], kind=t["kind"], description=t.get("description"))
                for t in schema.get("types") or []
            ],
        )

    def root_type_names(self) -> List[str]:
        """Non-null root type names in query, mutation, subscription order."""
        names = [self.query_type_name, self.mutation_type_name, self.subscription_type_name]
        return [n for n in names if n]

    def root_types_dict(self) -> Dict[str, Optional[Dict[str, str]]]:
        def _ref(name: Optional[str]) -> Optional[Dict[str, str]]:
            return {"name": name} if name else None

        return {
            "queryType": _ref(self.query_type_name),
            "mutationType": _ref(self.mutation_type_name),
            "subscriptionType": _ref(self.subscription_type_name),
        }


@dataclass
class TypeMatch:
    """Type whose name or description contains the keyword."""

    name: str
    kind: str
    description: Optional[str]
    match_reason: str

    @property
    def owner_type(self) -> str:
        return self.name

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "kind": self.kind,
            "description": self.description,
            "matchReason": self.match_reason,
        }


@dataclass
class FieldMatch:
    """Field matched inside a fetched type."""

    type_name: str
    field_name: str
    description: Optional[str]
    match_reason: str

    @property
    def owner_type(self) -> str:
        return self.type_name

    def to_dict(self) -> Dict[str, Any]:
        return {
            "typeName": self.type_name,
            "fieldName": self.field_name,
            "description": self.description,
            "matchReason": self.match_reason,
        }


@dataclass
class ArgMatch:
    """Argument of a field matched inside a fetched type."""

    type_name: str
    field_name: str
    arg_name: str
    description: Optional[str]
    match_reason: str

    @property
    def owner_type(self) -> str:
        return self.type_name

    def to_dict(self) -> Dict[str, Any]:
        return {
            "typeName": self.type_name,
            "fieldName": self.field_name,
            "argName": self.arg_name,
            "description": self.description,
            "matchReason": self.match_reason,
        }


@dataclass
class EnumValueMatch:
    """Enum value matched inside a fetched enum type."""

    type_name: str
    enum_value: str
    description: Optional[str]
    match_reason: str

    @property
    def owner_type(self) -> str:
        return self.type_name

    def to_dict(self) -> Dict[str, Any]:
        return {
            "typeName": self.type_name,
            "enumValue": self.enum_value,
            "description": self.description,
            "matchReason": self.match_reason,
        }


@dataclass
class SearchResult:
    """Aggregated keyword search results."""

    keyword: str
    types: List[TypeMatch] = field(default_factory=list)
    fields: List[FieldMatch] = field(default_factory=list)
    args: List[ArgMatch] = field(default_factory=list)
    enum_values: List[EnumValueMatch] = field(default_factory=list)

    @property
    def total_matches(self) -> int:
        return len(self.types) + len(self.fields) + len(self.args) + len(self.enum_values)

    def summary(self) -> Dict[str, int]:
        return {
            "totalMatches": self.total_matches,
            "typeMatches": len(self.types),
            "fieldMatches": len(self.fields),
            "enumValueMatches": len(self.enum_values),
            "argumentMatches": len(self.args),
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "keyword": self.keyword,
            "summary": self.summary(),
            "results": {
                "types": [m.to_dict() for m in self.types],
                "fields": [m.to_dict() for m in self.fields],
                "enumValues": [m.to_dict() for m in self.enum_values],
                "args": [m.to_dict() for m in self.args],
            },
        }
