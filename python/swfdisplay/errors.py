'''
Exceptions raised while decoding display records.
'''

class SWFDisplayError(Exception):
    '''Base class for everything raised by this package.'''
    pass


class IncompleteInputError(SWFDisplayError):
    '''The buffer ended before a fixed-width field could be read.

    This is not a data error: call again from the same offset once more
    bytes are available.
    '''

    def __init__(self, needed, offset=None):
        self.needed = needed
        self.offset = offset
        message = 'Need ' + str(needed) + ' more byte(s)'
        if offset is not None:
            message += ' at offset ' + str(offset)
        SWFDisplayError.__init__(self, message)


class DecodeError(SWFDisplayError):
    '''The data is malformed and waiting for more bytes will not help.'''
    pass


class UnknownDiscriminantError(DecodeError):

    def __init__(self, field, value):
        self.field = field
        self.value = value
        DecodeError.__init__(self, 'Unexpected ' + field + ': ' + str(value))
