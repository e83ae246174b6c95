from zxstim.computation.web import DetectionWeb as DetectionWeb
from zxstim.computation.web import as_detection_webs as as_detection_webs
