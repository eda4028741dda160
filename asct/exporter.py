"""Export sized components to the circuit (.cir) line format."""
# python libraries
import os
import logging

# 3rd party libraries

# own libraries
from asct.circuit_dtos import Component

logger = logging.getLogger(__name__)


def component_to_cir_line(component: Component) -> str:
    """Return the line '<id> (<connections>) <type>' of one component."""
    return f"{component.id} ({' '.join(component.connections)}) {component.type.value}"


def export_to_cir(components: list[Component] | tuple[Component, ...]) -> str:
    """
    Convert the components to the circuit text format, one line per component.

    :param components: components of a design point
    :type components: list[Component]
    :return: circuit text
    :rtype: str
    """
    return "\n".join(component_to_cir_line(component) for component in components)


def save_cir_file(components: list[Component] | tuple[Component, ...], filepath: str) -> None:
    """
    Save the components as circuit file.

    :param components: components of a design point
    :type components: list[Component]
    :param filepath: file name, '.cir' is added if missing
    :type filepath: str
    """
    if not filepath.endswith(".cir"):
        filepath = f"{filepath}.cir"

    directory = os.path.dirname(filepath)
    if directory != "":
        os.makedirs(directory, exist_ok=True)

    with open(filepath, "w", encoding="utf8") as cir_file:
        cir_file.write(export_to_cir(components))
    logger.info(f"Circuit file {filepath} written.")
