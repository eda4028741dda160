"""Library of sample topologies."""
# python libraries
import dataclasses

# 3rd party libraries

# own libraries


@dataclasses.dataclass(frozen=True)
class CircuitInfo:
    """Sample topology with description."""

    id: str
    name: str
    description: str
    netlist: str
    ports: str


FIVE_TRANSISTOR_OTA_NETLIST = """
M_IN_N (VOUT N_IN_N N_TAIL VSS) nmos4
M_IN_P (N_1 N_IN_P N_TAIL VSS) nmos4
M_LOAD_N (VOUT N_LOAD N_1 VDD) pmos4
M_LOAD_P (N_1 N_LOAD N_1 VDD) pmos4
M_TAIL (N_TAIL VBIAS VSS VSS) nmos4
""".strip()
FIVE_TRANSISTOR_OTA_PORTS = "VDD VSS N_IN_N N_IN_P VOUT VBIAS"

COMPARATOR_NETLIST = """
M_LATCH_1 (N_OUT_P N_OUT_N N_IN_P VSS) nmos4
M_LATCH_2 (N_OUT_N N_OUT_P N_IN_N VSS) nmos4
M_RESET_1 (N_OUT_P VCLK VDD VDD) pmos4
M_RESET_2 (N_OUT_N VCLK VDD VDD) pmos4
""".strip()
COMPARATOR_PORTS = "VDD VSS N_IN_P N_IN_N N_OUT_P N_OUT_N VCLK"

SAMPLE_CIRCUIT_LIST: list[CircuitInfo] = [
    CircuitInfo(
        id="five_transistor_ota",
        name="5T OTA",
        description="Five-transistor operational transconductance amplifier for high-speed, low-power applications.",
        netlist=FIVE_TRANSISTOR_OTA_NETLIST,
        ports=FIVE_TRANSISTOR_OTA_PORTS),
    CircuitInfo(
        id="dynamic_comparator",
        name="Dynamic Latch Comparator",
        description="Clocked latch comparator for high-speed, low-power comparisons.",
        netlist=COMPARATOR_NETLIST,
        ports=COMPARATOR_PORTS),
]


def get_sample_circuit(circuit_id: str) -> CircuitInfo:
    """
    Return the sample topology with the given id.

    :param circuit_id: id of the sample topology, e.g. 'five_transistor_ota'
    :type circuit_id: str
    :return: sample topology
    :rtype: CircuitInfo
    :raises KeyError: if the id is unknown
    """
    for circuit_info in SAMPLE_CIRCUIT_LIST:
        if circuit_info.id == circuit_id:
            return circuit_info
    raise KeyError(f"Sample circuit '{circuit_id}' not available.")
