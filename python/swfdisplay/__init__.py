'''
Decoders for the display records of SWF files: filters, gradients,
clip actions and blend modes.
'''
from swfdisplay.errors import *
from swfdisplay.records import *
from swfdisplay.parser import (DisplayParser, decode_blend_mode, decode_filter, decode_filter_list,
                               decode_color_stop, decode_morph_color_stop, decode_gradient,
                               decode_morph_gradient, decode_clip_event_flags, decode_clip_action,
                               decode_clip_actions_string)
