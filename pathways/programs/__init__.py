"""Program rule modules and the registry the aggregator iterates.

Adding a jurisdiction is one module exposing ``evaluate_<name>`` and one
entry in PROGRAM_MODULES.
"""

from pathways.models.enums import ProgramCode
from pathways.programs.alberta import evaluate_alberta
from pathways.programs.atlantic import evaluate_atlantic
from pathways.programs.base import PROGRAM_DISPLAY_NAMES, ProgramEvaluator, ProgramModule
from pathways.programs.british_columbia import evaluate_british_columbia
from pathways.programs.federal import evaluate_federal
from pathways.programs.manitoba import evaluate_manitoba
from pathways.programs.nova_scotia import evaluate_nova_scotia
from pathways.programs.ontario import evaluate_ontario
from pathways.programs.saskatchewan import evaluate_saskatchewan

# Registration order is the tie-break order for equal (tier, score) results.
PROGRAM_MODULES: tuple[ProgramModule, ...] = (
    ProgramModule(ProgramCode.OINP, evaluate_ontario),
    ProgramModule(ProgramCode.BC_PNP, evaluate_british_columbia),
    ProgramModule(ProgramCode.SINP, evaluate_saskatchewan),
    ProgramModule(ProgramCode.MPNP, evaluate_manitoba),
    ProgramModule(ProgramCode.AAIP, evaluate_alberta),
    ProgramModule(ProgramCode.NSNP, evaluate_nova_scotia),
    ProgramModule(ProgramCode.AIP, evaluate_atlantic),
    ProgramModule(ProgramCode.FEDERAL, evaluate_federal),
)

__all__ = [
    "PROGRAM_MODULES",
    "PROGRAM_DISPLAY_NAMES",
    "ProgramEvaluator",
    "ProgramModule",
    "evaluate_alberta",
    "evaluate_atlantic",
    "evaluate_british_columbia",
    "evaluate_federal",
    "evaluate_manitoba",
    "evaluate_nova_scotia",
    "evaluate_ontario",
    "evaluate_saskatchewan",
]
