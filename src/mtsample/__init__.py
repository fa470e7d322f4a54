"""mtsample — Mersenne Twister generator and sampling experiments."""

__version__ = "0.1.0"

from mtsample.config.defaults import default_experiment_config as default_experiment_config
from mtsample.config.schema import ClassesConfig as ClassesConfig
from mtsample.config.schema import ExperimentConfig as ExperimentConfig
from mtsample.config.schema import ExponentialConfig as ExponentialConfig
from mtsample.config.schema import GeneratorConfig as GeneratorConfig
from mtsample.config.schema import UniformConfig as UniformConfig
from mtsample.core.engine import ExperimentResult as ExperimentResult
from mtsample.core.engine import run_experiments as run_experiments
from mtsample.core.generator import MersenneTwister as MersenneTwister
from mtsample.core.rng import make_rng as make_rng
from mtsample.models.classes import class_frequencies as class_frequencies
from mtsample.models.classes import simulate_classes as simulate_classes
from mtsample.models.samplers import exponential as exponential
from mtsample.models.samplers import uniform as uniform
from mtsample.utils.exceptions import SeedError as SeedError
