"""Interopbility with PyZX representation of ZX-calculus graphs."""

from zxstim.interop.pyzx.utils import coordinate_key as coordinate_key
from zxstim.interop.pyzx.utils import format_coordinate as format_coordinate
from zxstim.interop.pyzx.utils import is_boundary as is_boundary
from zxstim.interop.pyzx.utils import is_x_no_phase as is_x_no_phase
from zxstim.interop.pyzx.utils import is_z_no_phase as is_z_no_phase
from zxstim.interop.pyzx.utils import is_zx_no_phase as is_zx_no_phase
