"""Init python files as modules."""
from asct.circuit_enums import *
from asct.circuit_dtos import *
from asct.boundary_check import *
from asct.toml_checker import *
from asct.generate_toml import *
# circuit model classes
from asct.performance_model import *
from asct.design_point import *
from asct.sample_circuits import *
from asct.netlist_parser import *
from asct.exporter import *
# optimization classes
from asct.population_sampler import *
from asct.constraint_filter import *
from asct.pareto import *
from asct.iterative_search import *
from asct.circuit_optimization import *
from asct.history import *
from asct.plot_control import *
from asct.summary_processing import *
# main control class
from asct.asctmainctl import *
