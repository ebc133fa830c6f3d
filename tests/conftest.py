from __future__ import annotations

from typing import Dict, Sequence

import pytest

from schema_bindgen.codegen.core.types import (
    DATETIME,
    INTEGER,
    LIST,
    STRING,
    ArrayType,
    ClassRef,
    FieldInfo,
    GenericType,
    Kind,
    TypeInfo,
    WildcardType,
)

MODELS = "acme.shop.models"
PARTS = "acme.shop.parts"


class StaticTypeSource:
    """Type source serving fabricated ``TypeInfo`` values per scope."""

    def __init__(self, types_by_scope: Dict[str, Sequence[TypeInfo]]):
        self.types_by_scope = types_by_scope
        self.scanned = []

    def find_candidate_types(self, scope: str) -> Sequence[TypeInfo]:
        self.scanned.append(scope)
        return list(self.types_by_scope.get(scope, ()))


@pytest.fixture
def base_info() -> TypeInfo:
    return TypeInfo(
        "Base",
        MODELS,
        is_abstract=True,
        fields=(
            FieldInfo("id", STRING),
            FieldInfo("VERSION", STRING, is_static=True),
        ),
    )


@pytest.fixture
def gadget_info() -> TypeInfo:
    return TypeInfo("Gadget", PARTS, fields=(FieldInfo("serial", STRING),))


@pytest.fixture
def color_info() -> TypeInfo:
    return TypeInfo("Color", MODELS, kind=Kind.ENUM, constants=("RED", "GREEN", "BLUE"))


@pytest.fixture
def widget_info(base_info: TypeInfo, gadget_info: TypeInfo) -> TypeInfo:
    """``Widget(Base)`` with a single reserved-word collection field."""
    return TypeInfo(
        "Widget",
        MODELS,
        supertype=base_info.as_ref(),
        fields=(FieldInfo("interface", GenericType(LIST, (gadget_info.as_ref(),))),),
    )


@pytest.fixture
def rich_widget_info(
    base_info: TypeInfo, gadget_info: TypeInfo, color_info: TypeInfo
) -> TypeInfo:
    """``Widget(Base)`` exercising every declared-type shape."""
    widget_ref = ClassRef("Widget", MODELS)
    return TypeInfo(
        "Widget",
        MODELS,
        supertype=base_info.as_ref(),
        fields=(
            FieldInfo("name", STRING),
            FieldInfo("default", INTEGER),
            FieldInfo("gadgets", GenericType(LIST, (gadget_info.as_ref(),))),
            FieldInfo("spares", ArrayType(gadget_info.as_ref())),
            FieldInfo(
                "wrapped",
                GenericType(
                    LIST,
                    (
                        GenericType(
                            ClassRef("Optional", "typing"),
                            (WildcardType((gadget_info.as_ref(),)),),
                        ),
                    ),
                ),
            ),
            FieldInfo("color", color_info.as_ref()),
            FieldInfo("created", DATETIME),
            FieldInfo("parent", widget_ref),
            FieldInfo("REGISTRY", STRING, is_static=True),
        ),
    )


@pytest.fixture
def shop_source(
    base_info: TypeInfo,
    gadget_info: TypeInfo,
    color_info: TypeInfo,
    rich_widget_info: TypeInfo,
) -> StaticTypeSource:
    return StaticTypeSource(
        {
            MODELS: [base_info, color_info, rich_widget_info],
            PARTS: [gadget_info],
            "acme.shop.empty": [],
        }
    )
