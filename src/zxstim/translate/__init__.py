"""Translation of ZX diagrams of QEC experiments into stim circuits.

The entry point is :func:`~.zx_to_stim`. It builds a :class:`~.QubitIndexMap` and a
:class:`~.RowSchedule` for the diagram, dispatches every vertex through a
:class:`~.TranslationRules` table while tracking measurements in
:class:`~.MeasurementRecords`, and finally adds ``DETECTOR`` instructions from the
detection webs with :func:`~.synthesize_detectors`.

"""

from zxstim.translate.detectors import synthesize_detectors as synthesize_detectors
from zxstim.translate.qubits import QubitIndexMap as QubitIndexMap
from zxstim.translate.records import MeasurementRecords as MeasurementRecords
from zxstim.translate.rules import TranslationRules as TranslationRules
from zxstim.translate.rules import default_translation_rules as default_translation_rules
from zxstim.translate.schedule import Row as Row
from zxstim.translate.schedule import RowSchedule as RowSchedule
from zxstim.translate.translator import zx_to_stim as zx_to_stim
from zxstim.translate.translator import zx_to_stim_circuit as zx_to_stim_circuit
