"""
pydantic-xml support for polymorphic SOAP records.

Records are ordinary pydantic-xml models:

    class Paging(XmlRecord, tag="Paging", nsmap={"": CM_NS}):
        start_index: int | None = element(tag="startIndex", default=None)

What pydantic-xml does not cover is XML Schema polymorphism. A field typed
with a base class that carries a ``discriminator`` (for example ApiError
with ``ApiError.Type``) may hold any subclass: such subclasses are written
with ``xsi:type``, and on decode the ``xsi:type`` attribute or, failing that,
the discriminator element selects the class.
"""

import base64
import copy
import types
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, ClassVar, Optional, TypeVar, Union, get_args, get_origin

import pydantic_core as pdc
from lxml import etree
from pydantic import BeforeValidator, Field, PlainSerializer
from pydantic_xml import BaseXmlModel
from pydantic_xml.element import SearchMode, XmlElementReader, XmlElementWriter, is_element_nill
from pydantic_xml.element.native import XmlElement
from pydantic_xml.fields import extract_field_xml_entity_info

XSI_NS = "http://www.w3.org/2001/XMLSchema-instance"
XSI_TYPE = f"{{{XSI_NS}}}type"

E = TypeVar("E", bound=Enum)

# API enumerations grow between releases; values this version does not know
# are kept as plain strings.
OpenEnum = Annotated[Union[E, str], Field(union_mode="left_to_right")]

Base64Bytes = Annotated[
    bytes,
    BeforeValidator(lambda value: base64.b64decode(value) if isinstance(value, str) else value),
    PlainSerializer(lambda value: base64.b64encode(value).decode("ascii"), return_type=str, when_used="json"),
]

# {namespace}tag -> first record class declared under that element name
_records: dict[str, type["XmlRecord"]] = {}


def lookup_record(name: str) -> Optional[type["XmlRecord"]]:
    """Find the record class declared for an element name in Clark notation."""
    return _records.get(name)


def make_parser() -> etree.XMLParser:
    """A parser that never resolves external entities or touches the network."""
    return etree.XMLParser(resolve_entities=False, no_network=True)


def _qualify(prefix: Optional[str], nsmap: Optional[dict], local: str) -> str:
    uri = (nsmap or {}).get(prefix or "")
    return f"{{{uri}}}{local}" if uri else local


def resolve_xsi_types(root: etree._Element) -> etree._Element:
    """
    Copy ``root`` with every ``xsi:type`` value rewritten to ``{namespace}local``.

    pydantic-xml drops namespace declarations when it reads a tree, so
    prefixed type names are resolved first, against the original tree where
    ancestors' declarations are still in scope.
    """
    resolved = []
    for el in root.iter():
        value = el.get(XSI_TYPE) if isinstance(el.tag, str) else None
        if value and not value.startswith("{"):
            prefix, _, local = value.rpartition(":")
            uri = el.nsmap.get(prefix or None)
            value = f"{{{uri}}}{local}" if uri else local
        resolved.append(value)

    root = copy.deepcopy(root)
    for el, value in zip(root.iter(), resolved):
        if value:
            el.set(XSI_TYPE, value)
    return root


class XmlRecord(BaseXmlModel, search_mode=SearchMode.UNORDERED):
    """
    Base class for SOAP records.

    Class keywords on top of pydantic-xml's:
        discriminator: Local name of the element that names the concrete
            type when ``xsi:type`` is absent. Inherited by subclasses and
            marks fields typed with the class as polymorphic.
        type_ns: Namespace of the class's schema type when it differs from
            its element namespace.
    """

    __xml_discriminator__: ClassVar[Optional[str]] = None
    __xml_type_ns__: ClassVar[Optional[str]] = None

    def __init_subclass__(cls, discriminator: Optional[str] = None, type_ns: Optional[str] = None, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        if discriminator is not None:
            cls.__xml_discriminator__ = discriminator
        cls.__xml_type_ns__ = type_ns or (cls.__xml_nsmap__ or {}).get(cls.__xml_ns__ or "")
        if kwargs.get("tag"):
            _records.setdefault(_qualify(cls.__xml_ns__, cls.__xml_nsmap__, cls.__xml_tag__), cls)

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        for name, info in cls.model_fields.items():
            item_type, _ = _item_type(info.annotation)
            if isinstance(item_type, type) and issubclass(item_type, XmlRecord) and item_type.__xml_discriminator__:
                cls.__xml_field_validators__[name] = _read_variants
                cls.__xml_field_serializers__[name] = _write_variants

    # --- encoding ---

    def to_xml_tree(self, *, skip_empty: bool = False, exclude_none: bool = True, exclude_unset: bool = False):
        return super().to_xml_tree(skip_empty=skip_empty, exclude_none=exclude_none, exclude_unset=exclude_unset)

    def to_xml(self, *, skip_empty: bool = False, exclude_none: bool = True, exclude_unset: bool = False, **kwargs):
        return super().to_xml(skip_empty=skip_empty, exclude_none=exclude_none, exclude_unset=exclude_unset, **kwargs)

    # --- decoding ---

    @classmethod
    def from_xml(cls, source: str | bytes, context: Optional[dict] = None, empty_as_string: bool = False, **kwargs):
        """Parse and decode ``source``; external entities and network access stay disabled."""
        kwargs.setdefault("parser", make_parser())
        return super().from_xml(source, context=context, empty_as_string=empty_as_string, **kwargs)

    @classmethod
    def from_xml_tree(cls, root: etree._Element, context: Optional[dict] = None, empty_as_string: bool = False):
        """
        Decode ``root``, which must carry this class's element name.

        Raises:
            pydantic_xml.ParsingError: If the element name does not match.
            pydantic.ValidationError: If a value does not validate.
        """
        if root.tag != cls.__xml_serializer__.element_name:
            return super().from_xml_tree(root, context=context, empty_as_string=empty_as_string)
        return cls.from_element(root, context=context)

    @classmethod
    def from_element(cls, el: etree._Element, context: Optional[dict] = None) -> "XmlRecord":
        """
        Bind an lxml element of any name to this record class.

        The ``xsi:type`` attribute or the discriminator element may select a
        subclass.
        """
        el = resolve_xsi_types(el)
        discriminator = None
        if cls.__xml_discriminator__:
            discriminator = el.findtext(_qualify(cls.__xml_ns__, cls.__xml_nsmap__, cls.__xml_discriminator__))
        variant = cls.variant_for(el.get(XSI_TYPE), discriminator)
        return variant.__xml_serializer__.deserialize(
            XmlElement.from_native(el), context=context, sourcemap={}, loc=(), empty_as_string=False
        )

    @classmethod
    def variant_for(cls, type_name: Optional[str], discriminator: Optional[str] = None) -> type["XmlRecord"]:
        """The subclass named by a resolved ``xsi:type`` or a discriminator value; ``cls`` if none matches."""
        if type_name:
            if type_name.startswith("{"):
                ns, _, local = type_name[1:].partition("}")
            else:
                ns, local = None, type_name.rpartition(":")[2]
            found = cls._find_variant(local, ns)
            if found is not None:
                return found
        if discriminator:
            found = cls._find_variant(discriminator.strip(), None)
            if found is not None:
                return found
        return cls

    @classmethod
    def _find_variant(cls, local: str, ns: Optional[str]) -> Optional[type["XmlRecord"]]:
        pending = [cls]
        while pending:
            candidate = pending.pop(0)
            if candidate.__xml_tag__ == local and (ns is None or candidate.__xml_type_ns__ == ns):
                return candidate
            pending.extend(candidate.__subclasses__())
        return None

    def xsi_type_name(self, nsmap: dict) -> str:
        """The ``xsi:type`` value naming this record's class under ``nsmap``."""
        prefixes = [prefix for prefix, uri in nsmap.items() if uri == self.__xml_type_ns__]
        prefix = next((prefix for prefix in prefixes if prefix), "")
        return f"{prefix}:{self.__xml_tag__}" if prefix else self.__xml_tag__


def _item_type(annotation: Any) -> tuple[Any, bool]:
    """Reduce a field annotation to (item type, repeated)."""
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        return _item_type(args[0]) if len(args) == 1 else (None, False)
    if origin is list:
        args = get_args(annotation)
        return (args[0] if args else None), True
    return annotation, False


@dataclass(frozen=True)
class _Slot:
    name: str
    nsmap: dict
    base: type[XmlRecord]
    repeated: bool


_slots: dict[tuple[type, str], _Slot] = {}


def _slot(model: type[XmlRecord], field_name: str) -> _Slot:
    """Element name and namespaces of a polymorphic field, resolved the way pydantic-xml resolves sub-models."""
    key = (model, field_name)
    slot = _slots.get(key)
    if slot is None:
        info = model.model_fields[field_name]
        base, repeated = _item_type(info.annotation)
        entity = extract_field_xml_entity_info(info)
        tag = (entity.path if entity else None) or base.__xml_tag__ or field_name
        prefix = next(
            (ns for ns in (entity.ns if entity else None, base.__xml_ns__, model.__xml_ns__) if ns is not None), None
        )
        nsmap = {**(model.__xml_nsmap__ or {}), **(base.__xml_nsmap__ or {}), **((entity.nsmap if entity else None) or {})}
        slot = _slots[key] = _Slot(_qualify(prefix, nsmap, tag), nsmap, base, repeated)
    return slot


def _read_variants(model: type[XmlRecord], element: XmlElementReader, field_name: str) -> Any:
    slot = _slot(model, field_name)
    items = []
    while (sub := element.pop_element(slot.name, model.__xml_search_mode__)) is not None:
        item = None if is_element_nill(sub) else _read_variant(slot.base, sub)
        if not slot.repeated:
            return item
        if item is not None:
            items.append(item)
    return items or None


def _read_variant(base: type[XmlRecord], sub: XmlElementReader) -> XmlRecord:
    discriminator = None
    if base.__xml_discriminator__:
        name = _qualify(base.__xml_ns__, base.__xml_nsmap__, base.__xml_discriminator__)
        found = sub.create_snapshot().pop_element(name, SearchMode.UNORDERED)
        discriminator = found.pop_text() if found is not None else None
    variant = base.variant_for(sub.get_attrib(XSI_TYPE), discriminator)
    return variant.__xml_serializer__.deserialize(sub, context=None, sourcemap={}, loc=(), empty_as_string=False)


def _write_variants(record: XmlRecord, element: XmlElementWriter, value: Any, field_name: str) -> None:
    if value is None:
        return
    slot = _slot(type(record), field_name)
    for item in value if slot.repeated else [value]:
        if item is None:
            continue
        typed = type(item) is not slot.base
        nsmap = slot.nsmap
        if typed:
            nsmap = {**(item.__xml_nsmap__ or {}), **slot.nsmap, "xsi": XSI_NS}
        sub = element.make_element(slot.name, nsmap=nsmap)
        if typed:
            sub.set_attribute(XSI_TYPE, item.xsi_type_name(nsmap))
        item.__xml_serializer__.serialize(
            sub, item, pdc.to_jsonable_python(item, by_alias=False), exclude_none=True
        )
        element.append_element(sub)
