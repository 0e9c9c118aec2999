"""Public façade (stable API surface).

Only symbols re-exported from here are considered public and semver-stable.
Internal modules may change without notice.
"""

from synaptogen.api.version import __version__
from synaptogen.connectivity.positions import PopulationFrame, generate_positions
from synaptogen.connectivity.spatial import neurons_in_radius
from synaptogen.connectivity.strategies import (
    STRATEGIES,
    AllToAll,
    ConnectionStrategy,
    FixedDegree,
    Sparse,
    apply_result,
    connect_equalized,
    connect_fixed_degree,
    connect_fixed_degree_in_radius,
    connect_sparse,
    connect_to_n,
    polarize_synapses,
    strategy_from_config,
)
from synaptogen.contracts.connections import Add, ConnectionsResult, Remove, Reset
from synaptogen.contracts.network import INetwork
from synaptogen.contracts.neurons import INeuron, NeuronPosition, Polarity
from synaptogen.contracts.synapses import Direction, Synapse
from synaptogen.core.torch_utils import make_generator
from synaptogen.errors import ConnectivityError, InvalidConfiguration, SynaptogenError
from synaptogen.network import Network, Neuron
from synaptogen.stats import (
    ConstantDistribution,
    NormalDistribution,
    UniformDistribution,
    sample_without_replacement,
    shuffled,
)

__all__ = [
    "__version__",
    # model
    "INeuron",
    "Neuron",
    "NeuronPosition",
    "Polarity",
    "Direction",
    "Synapse",
    "INetwork",
    "Network",
    "PopulationFrame",
    "generate_positions",
    "neurons_in_radius",
    # results
    "Add",
    "Remove",
    "Reset",
    "ConnectionsResult",
    # strategies
    "STRATEGIES",
    "ConnectionStrategy",
    "AllToAll",
    "FixedDegree",
    "Sparse",
    "strategy_from_config",
    "apply_result",
    "polarize_synapses",
    "connect_to_n",
    "connect_fixed_degree",
    "connect_fixed_degree_in_radius",
    "connect_sparse",
    "connect_equalized",
    # randomness
    "make_generator",
    "shuffled",
    "sample_without_replacement",
    "NormalDistribution",
    "UniformDistribution",
    "ConstantDistribution",
    # errors
    "SynaptogenError",
    "InvalidConfiguration",
    "ConnectivityError",
]
