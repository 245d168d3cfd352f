'''
Decoders for the SWF display records: filters, gradients, clip actions
and blend modes.
'''
import logging
from struct import Struct
from swfdisplay.errors import IncompleteInputError, UnknownDiscriminantError
from swfdisplay.flags import *
from swfdisplay.records import *

logger = logging.getLogger(__name__)

BLEND_MODES = {
     0: BlendMode.NORMAL,
     1: BlendMode.NORMAL,
     2: BlendMode.LAYER,
     3: BlendMode.MULTIPLY,
     4: BlendMode.SCREEN,
     5: BlendMode.LIGHTEN,
     6: BlendMode.DARKEN,
     7: BlendMode.DIFFERENCE,
     8: BlendMode.ADD,
     9: BlendMode.SUBTRACT,
    10: BlendMode.INVERT,
    11: BlendMode.ALPHA,
    12: BlendMode.ERASE,
    13: BlendMode.OVERLAY,
    14: BlendMode.HARDLIGHT,
}

GRADIENT_SPREADS = {
    0: GradientSpread.PAD,
    1: GradientSpread.REFLECT,
    2: GradientSpread.REPEAT,
}

COLOR_SPACES = {
    0: ColorSpace.SRGB,
    1: ColorSpace.LINEAR_RGB,
}

# number of 4-byte floats in a color matrix filter
COLOR_MATRIX_SIZE = 20

class DisplayParser(object):
    '''
    Reads display records from an in-memory buffer.

    Every read either consumes the full width of its field or raises
    IncompleteInputError without moving the position. A parser that raised
    is not resumable; decode again from the original offset once more data
    has arrived.
    '''

    def __init__(self, data, strict=True):
        self.ui8 = Struct('<B')
        self.si16 = Struct('<h')
        self.ui16 = Struct('<H')
        self.si32 = Struct('<i')
        self.ui32 = Struct('<I')
        self.f32 = Struct('<f')

        self.data = memoryview(data)
        self.position = 0
        self.strict = strict

        self.filter_handlers = {
            FilterKind.DROP_SHADOW: self.readDropShadowFilter,
            FilterKind.BLUR: self.readBlurFilter,
            FilterKind.GLOW: self.readGlowFilter,
            FilterKind.BEVEL: self.readBevelFilter,
            FilterKind.GRADIENT_GLOW: self.readGradientGlowFilter,
            FilterKind.CONVOLUTION: self.readConvolutionFilter,
            FilterKind.COLOR_MATRIX: self.readColorMatrixFilter,
            FilterKind.GRADIENT_BEVEL: self.readGradientBevelFilter,
        }

    def remaining(self):
        return self.data[self.position:].tobytes()

    def readBlendMode(self):
        blend_id = self.readUI8()
        return self.lookup(BLEND_MODES, blend_id, 'blend mode', BlendMode.NORMAL)

    def lookup(self, table, value, field, fallback):
        '''Map a discriminant through a table, applying the strictness policy.
        '''
        try:
            return table[value]
        except KeyError:
            if self.strict:
                raise UnknownDiscriminantError(field, value)
            logger.warning('Unexpected %s %d, using %s', field, value, fallback.name)
            return fallback

    def readFilterList(self):
        count = self.readUI8()
        return [self.readFilter() for _ in range(count)]

    def readFilter(self):
        offset = self.position
        filter_id = self.readUI8()
        if filter_id not in self.filter_handlers:
            # the payload length depends on the kind, so there is nothing to skip to
            raise UnknownDiscriminantError('filter kind', filter_id)
        kind = FilterKind(filter_id)
        logger.debug('Reading %s filter at offset %d', kind.name, offset)
        handler = self.filter_handlers[kind]
        return handler()

    def readDropShadowFilter(self):
        color = self.readRGBA()
        blur_x = self.readFixed16()
        blur_y = self.readFixed16()
        angle = self.readFixed16()
        distance = self.readFixed16()
        strength = self.readFixed8()
        flags = unpackFlags(self.readUI8(), DROP_SHADOW_FLAGS)
        return DropShadowFilter(color=color, blur_x=blur_x, blur_y=blur_y, angle=angle,
                                distance=distance, strength=strength, **flags)

    def readBlurFilter(self):
        blur_x = self.readFixed16()
        blur_y = self.readFixed16()
        flags = unpackFlags(self.readUI8(), BLUR_FLAGS)
        return BlurFilter(blur_x=blur_x, blur_y=blur_y, **flags)

    def readGlowFilter(self):
        color = self.readRGBA()
        blur_x = self.readFixed16()
        blur_y = self.readFixed16()
        strength = self.readFixed8()
        flags = unpackFlags(self.readUI8(), GLOW_FLAGS)
        return GlowFilter(color=color, blur_x=blur_x, blur_y=blur_y, strength=strength, **flags)

    def readBevelFilter(self):
        shadow_color = self.readRGBA()
        highlight_color = self.readRGBA()
        blur_x = self.readFixed16()
        blur_y = self.readFixed16()
        angle = self.readFixed16()
        distance = self.readFixed16()
        strength = self.readFixed8()
        flags = unpackFlags(self.readUI8(), BEVEL_FLAGS)
        return BevelFilter(shadow_color=shadow_color, highlight_color=highlight_color,
                           blur_x=blur_x, blur_y=blur_y, angle=angle, distance=distance,
                           strength=strength, **flags)

    def readGradientGlowFilter(self):
        return self.readGradientFilter(GradientGlowFilter)

    def readGradientBevelFilter(self):
        return self.readGradientFilter(GradientBevelFilter)

    def readGradientFilter(self, filter_class):
        color_count = self.readUI8()
        gradient = self.readFilterGradient(color_count)
        blur_x = self.readFixed16()
        blur_y = self.readFixed16()
        angle = self.readFixed16()
        distance = self.readFixed16()
        strength = self.readFixed8()
        flags = unpackFlags(self.readUI8(), BEVEL_FLAGS)
        return filter_class(gradient=gradient, blur_x=blur_x, blur_y=blur_y, angle=angle,
                            distance=distance, strength=strength, **flags)

    def readConvolutionFilter(self):
        matrix_width = self.readUI8()
        matrix_height = self.readUI8()
        divisor = self.readF32()
        bias = self.readF32()
        matrix = [self.readF32() for _ in range(matrix_width * matrix_height)]
        default_color = self.readRGBA()
        flags = unpackFlags(self.readUI8(), CONVOLUTION_FLAGS)
        return ConvolutionFilter(matrix_width=matrix_width, matrix_height=matrix_height,
                                 divisor=divisor, bias=bias, matrix=matrix,
                                 default_color=default_color, **flags)

    def readColorMatrixFilter(self):
        matrix = [self.readF32() for _ in range(COLOR_MATRIX_SIZE)]
        return ColorMatrixFilter(matrix=matrix)

    def readFilterGradient(self, color_count):
        '''Read the stops of a gradient filter.

        Unlike GRADIENT records, the colors are stored together first and the
        ratios after them.
        '''
        colors = [self.readRGBA() for _ in range(color_count)]
        ratios = [self.readUI8() for _ in range(color_count)]
        return [ColorStop(ratio=ratio, color=color) for ratio, color in zip(ratios, colors)]

    def readGradientFlags(self):
        flags = unpackFlags(self.readUI8(), GRADIENT_FLAGS)
        spread = self.lookup(GRADIENT_SPREADS, flags['spread'], 'gradient spread', GradientSpread.PAD)
        color_space = self.lookup(COLOR_SPACES, flags['color_space'], 'color space', ColorSpace.SRGB)
        return spread, color_space, flags['color_count']

    def readGradient(self, with_alpha):
        spread, color_space, color_count = self.readGradientFlags()
        colors = [self.readColorStop(with_alpha) for _ in range(color_count)]
        return Gradient(spread=spread, color_space=color_space, colors=colors)

    def readMorphGradient(self, with_alpha):
        spread, color_space, color_count = self.readGradientFlags()
        colors = [self.readMorphColorStop(with_alpha) for _ in range(color_count)]
        return MorphGradient(spread=spread, color_space=color_space, colors=colors)

    def readColorStop(self, with_alpha):
        ratio = self.readUI8()
        color = self.readRGBA() if with_alpha else self.readRGB()
        return ColorStop(ratio=ratio, color=color)

    def readMorphColorStop(self, with_alpha):
        start = self.readColorStop(with_alpha)
        end = self.readColorStop(with_alpha)
        return MorphColorStop(ratio=start.ratio, color=start.color,
                              morph_ratio=end.ratio, morph_color=end.color)

    def readClipActionsString(self, extended_events):
        _reserved = self.readUI16()
        _all_events = self.readEventWord(extended_events)
        clip_actions = []
        while True:
            if self.peekEventWord(extended_events) == 0:
                self.readEventWord(extended_events)
                break
            clip_actions.append(self.readClipAction(extended_events))
        return clip_actions

    def readClipAction(self, extended_events):
        offset = self.position
        events = self.readClipEventFlags(extended_events)
        actions_size = self.readUI32()
        if events.key_press:
            key_code = self.readUI8()
            actions_size = max(actions_size - 1, 0)
        else:
            key_code = None
        actions = self.readBytes(actions_size)
        logger.debug('Read clip action at offset %d with %d byte(s) of actions', offset, actions_size)
        return ClipAction(events=events, key_code=key_code, actions=actions)

    def readClipEventFlags(self, extended_events):
        return ClipEventFlags(**unpackFlags(self.readEventWord(extended_events), CLIP_EVENT_FLAGS))

    def readEventWord(self, extended_events):
        return self.readUI32() if extended_events else self.readUI16()

    def peekEventWord(self, extended_events):
        position = self.position
        word = self.readEventWord(extended_events)
        self.position = position
        return word

    def readRGBA(self):
        red, green, blue, alpha = self.readBytes(4)
        return RGBA(red=red, green=green, blue=blue, alpha=alpha)

    def readRGB(self):
        red, green, blue = self.readBytes(3)
        return RGBA(red=red, green=green, blue=blue, alpha=255)

    def readFixed16(self):
        '''Read a signed 16.16 fixed-point number.
        '''
        return self.readSI32() / 65536.0

    def readFixed8(self):
        '''Read a signed 8.8 fixed-point number.
        '''
        return self.readSI16() / 256.0

    def readUI8(self):
        '''Read an unsigned 8 bit integer.
        '''
        return self.ui8.unpack(self.readBytes(1))[0]

    def readSI16(self):
        '''Read a signed 16 bit integer.
        '''
        return self.si16.unpack(self.readBytes(2))[0]

    def readUI16(self):
        '''Read an unsigned 16 bit integer.
        '''
        return self.ui16.unpack(self.readBytes(2))[0]

    def readSI32(self):
        '''Read a signed 32 bit integer.
        '''
        return self.si32.unpack(self.readBytes(4))[0]

    def readUI32(self):
        '''Read an unsigned 32 bit integer.
        '''
        return self.ui32.unpack(self.readBytes(4))[0]

    def readF32(self):
        '''Read a 32-bit floating point
        '''
        return self.f32.unpack(self.readBytes(4))[0]

    def readBytes(self, count):
        '''Read exactly count bytes
        '''
        available = len(self.data) - self.position
        if count > available:
            raise IncompleteInputError(count - available, self.position)
        result = self.data[self.position:self.position + count].tobytes()
        self.position += count
        return result


def decode(data, reader, args=(), strict=True):
    '''Run one parser method over data and return (remaining, value).
    '''
    parser = DisplayParser(data, strict)
    value = getattr(parser, reader)(*args)
    return parser.remaining(), value

def decode_blend_mode(data, strict=True):
    return decode(data, 'readBlendMode', strict=strict)

def decode_filter(data, strict=True):
    return decode(data, 'readFilter', strict=strict)

def decode_filter_list(data, strict=True):
    return decode(data, 'readFilterList', strict=strict)

def decode_color_stop(data, with_alpha, strict=True):
    return decode(data, 'readColorStop', (with_alpha,), strict=strict)

def decode_morph_color_stop(data, with_alpha, strict=True):
    return decode(data, 'readMorphColorStop', (with_alpha,), strict=strict)

def decode_gradient(data, with_alpha, strict=True):
    return decode(data, 'readGradient', (with_alpha,), strict=strict)

def decode_morph_gradient(data, with_alpha, strict=True):
    return decode(data, 'readMorphGradient', (with_alpha,), strict=strict)

def decode_clip_event_flags(data, extended_events, strict=True):
    return decode(data, 'readClipEventFlags', (extended_events,), strict=strict)

def decode_clip_action(data, extended_events, strict=True):
    return decode(data, 'readClipAction', (extended_events,), strict=strict)

def decode_clip_actions_string(data, extended_events, strict=True):
    return decode(data, 'readClipActionsString', (extended_events,), strict=strict)
