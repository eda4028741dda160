"""Parse netlist and port texts into components and a connectivity graph."""
# python libraries
import logging

# 3rd party libraries

# own libraries
from asct.circuit_dtos import Component, GraphNode, GraphLink, GraphData
from asct.circuit_enums import ComponentType

logger = logging.getLogger(__name__)

# Net names with supply node type
SUPPLY_NET_TYPE_DICT: dict[str, ComponentType] = {"VDD": ComponentType.vdd, "VSS": ComponentType.vss}


def parse_component_type(keyword: str, line_number: int) -> ComponentType:
    """
    Convert the netlist keyword to the component type.

    :param keyword: netlist keyword, e.g. 'nmos4'
    :type keyword: str
    :param line_number: line number for the error report
    :type line_number: int
    :return: component type
    :rtype: ComponentType
    :raises ValueError: in case of an unknown keyword
    """
    try:
        return ComponentType(keyword)
    except ValueError as exc:
        available_keyword_list = [component_type.value for component_type in ComponentType]
        raise ValueError(f"Line {line_number}: Unknown component type '{keyword}'. Available types: {available_keyword_list}.") from exc


def parse_netlist(netlist_text: str) -> list[Component]:
    """
    Parse the netlist text.

    Each line has the format '<id> (<net> <net> ...) <type>'. Empty lines and lines with less than
    three tokens are skipped.

    :param netlist_text: netlist
    :type netlist_text: str
    :return: components with default size 1
    :rtype: list[Component]
    :raises ValueError: in case of missing brackets or unknown component types
    """
    component_list: list[Component] = []

    for line_number, line in enumerate(netlist_text.splitlines(), start=1):
        part_list = line.split()
        if len(part_list) < 3:
            if part_list:
                logger.info(f"Line {line_number} '{line.strip()}' has less than 3 entries and is skipped.")
            continue

        open_index = line.find("(")
        close_index = line.rfind(")")
        if open_index < 0 or close_index < open_index:
            raise ValueError(f"Line {line_number}: Connections of '{part_list[0]}' are not enclosed in brackets.")

        component_list.append(Component(
            id=part_list[0],
            type=parse_component_type(part_list[-1], line_number),
            connections=tuple(line[open_index + 1:close_index].split()),
            size=1.0))

    logger.debug(f"Parsed {len(component_list)} components.")
    return component_list


def parse_ports(ports_text: str) -> list[str]:
    """Split the port text at white spaces."""
    return ports_text.split()


def net_node_type(net_name: str, port_list: list[str]) -> ComponentType:
    """
    Return the node type of a net.

    :param net_name: name of the net
    :type net_name: str
    :param port_list: names of the ports
    :type port_list: list[str]
    :return: VDD or VSS for supply nets, PORT for ports, NET otherwise
    :rtype: ComponentType
    """
    if net_name.upper() in SUPPLY_NET_TYPE_DICT:
        return SUPPLY_NET_TYPE_DICT[net_name.upper()]
    if net_name in port_list:
        return ComponentType.port
    return ComponentType.net


def create_graph_data(netlist_text: str, ports_text: str) -> GraphData:
    """
    Parse the netlist and the ports and create the connectivity graph.

    Components are nodes (PORT type, if listed as port), each connection is a link from the
    component to the net node. Ports without connection are added as nodes, too.

    :param netlist_text: netlist
    :type netlist_text: str
    :param ports_text: port names separated by white spaces
    :type ports_text: str
    :return: components, nodes and links
    :rtype: GraphData
    """
    component_list = parse_netlist(netlist_text)
    port_list = parse_ports(ports_text)

    node_list: list[GraphNode] = []
    link_list: list[GraphLink] = []
    node_id_set: set[str] = set()

    def add_node(node_id: str, node_type: ComponentType, size: float | None = None) -> None:
        if node_id not in node_id_set:
            node_list.append(GraphNode(id=node_id, type=node_type, size=size))
            node_id_set.add(node_id)

    for component in component_list:
        component_node_type = ComponentType.port if component.id in port_list else component.type
        add_node(component.id, component_node_type, component.size)

        for net_name in component.connections:
            add_node(net_name, net_node_type(net_name, port_list))
            link_list.append(GraphLink(source=component.id, target=net_name))

    for port in port_list:
        add_node(port, net_node_type(port, port_list))

    return GraphData(components=component_list, nodes=node_list, links=link_list)
