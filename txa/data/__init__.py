from txa.data.parameters import ContrastParameters, DEFAULT_PARAMETERS, resolve_parameters
