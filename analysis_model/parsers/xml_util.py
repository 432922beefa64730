import xml.etree.ElementTree as ET


def first_child(element: ET.Element, name: str) -> ET.Element | None:
    return element.find(name)


def children(element: ET.Element | None, name: str) -> list[ET.Element]:
    if element is None:
        return []
    return element.findall(name)


def grandchildren(element: ET.Element, section: str, name: str) -> list[ET.Element]:
    """Children named ``name`` of the first ``section`` child, e.g. Types/Type."""
    return children(first_child(element, section), name)


def attr(element: ET.Element, name: str) -> str:
    return element.get(name) or ""


def child_text(element: ET.Element, name: str) -> str:
    child = element.find(name)
    if child is None:
        return ""
    return "".join(child.itertext()).strip()


def text_content(element: ET.Element) -> str:
    return "".join(element.itertext())
