from ._version import __version__ as __version__
from .computation.web import DetectionWeb as DetectionWeb
from .computation.web import as_detection_webs as as_detection_webs
from .translate import MeasurementRecords as MeasurementRecords
from .translate import QubitIndexMap as QubitIndexMap
from .translate import RowSchedule as RowSchedule
from .translate import TranslationRules as TranslationRules
from .translate import default_translation_rules as default_translation_rules
from .translate import zx_to_stim as zx_to_stim
from .translate import zx_to_stim_circuit as zx_to_stim_circuit
from .utils import InvalidCoordinateError as InvalidCoordinateError
from .utils import Pauli as Pauli
from .utils import ZXStimError as ZXStimError
from .utils import ZXStimWarning as ZXStimWarning
