import dataclasses
import re
from typing import Annotated, get_args, get_origin

import tabulate


class TypeValidator:
    pass


class OneOf(TypeValidator):
    def __init__(self, choices):
        self._choices = choices

    def __call__(self, value):
        if value not in self._choices:
            raise ValueError(f"Value {value!r} is not one of {sorted(self._choices)}")


class Regex(TypeValidator):
    def __init__(self, pattern: str):
        self._pattern = pattern
        self._regex = re.compile(pattern)

    def __call__(self, value: str):
        if not self._regex.fullmatch(value):
            raise ValueError(f"Value {value} does not match pattern {self._pattern}")


@dataclasses.dataclass
class BaseModel:
    @classmethod
    def init_recursive(cls, **kwargs):
        init_kwargs = {}
        for f in dataclasses.fields(cls):
            if f.name not in kwargs:
                continue

            init_kwargs[f.name] = cls._init_arg(kwargs[f.name], f.type)

        return cls(**init_kwargs)

    @classmethod
    def _init_arg(cls, value, type_hint):
        origin = get_origin(type_hint)
        if origin is Annotated:
            return cls._init_arg(value, type_hint.__origin__)

        if origin is list:
            (item_type,) = get_args(type_hint)
            return [cls._init_arg(v, item_type) for v in value]

        if origin is dict:
            key_type, val_type = get_args(type_hint)
            return {
                cls._init_arg(k, key_type): cls._init_arg(v, val_type)
                for k, v in value.items()
            }

        return value

    def __post_init__(self):
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            self._validate_field(field.name, value, field.type)

    def _validate_field(self, path, value, type_hint, metadata=()):
        origin = get_origin(type_hint)

        if origin is Annotated:
            base_type, *metadata = get_args(type_hint)
            self._validate_field(path, value, base_type, metadata)
            return

        if not isinstance(value, origin or type_hint):
            raise TypeError(
                f"{path}: Expected {type_hint.__name__}, got {type(value).__name__}"
            )

        for validator in metadata:
            if isinstance(validator, TypeValidator):
                try:
                    validator(value)
                except Exception as e:
                    raise ValueError(f"{path}: Invalid value") from e

        if origin is list:
            (item_type,) = get_args(type_hint)
            for idx, item in enumerate(value):
                self._validate_field(f"{path}[{idx}]", item, item_type)
        elif origin is dict:
            key_type, val_type = get_args(type_hint)
            for k, v in value.items():
                self._validate_field(f"{path}[key={k}]", k, key_type)
                self._validate_field(f"{path}[{k}]", v, val_type)


Vertex = Annotated[str, Regex(r"\S(.*\S)?")]
TableFormat = Annotated[str, OneOf(frozenset(tabulate.tabulate_formats))]


@dataclasses.dataclass
class GraphDesc(BaseModel):
    name: str = "graph"
    edges: dict[Vertex, list[Vertex]] = dataclasses.field(default_factory=dict)
    right: list[Vertex] = dataclasses.field(default_factory=list)

    def left_vertices(self):
        return list(self.edges)

    def right_vertices(self):
        """All vertices in V: first the ones with edges, then isolated ones"""
        vertices = {}
        for vs in self.edges.values():
            vertices.update(dict.fromkeys(vs))
        vertices.update(dict.fromkeys(self.right))
        return list(vertices)


@dataclasses.dataclass
class Config(BaseModel):
    tablefmt: TableFormat = "plain"
    color: bool = True
