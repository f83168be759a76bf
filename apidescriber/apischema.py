"""根据单个 JSON 样例推断 OpenAPI 响应结构

只有一个样例，所以：
- 对象的所有属性都是 required
- 列表只取第一个元素推断 items，其余元素假定结构相同
"""
import logging
import re

STATUS_CODE = '200'
CONTENT_TYPE = 'application/json'
DEFAULT_DESCRIPTION = 'Returns a list of translations'

# 无法推断时的占位，不是合法的 schema，需要人工补充
PLACEHOLDER = 'TODO'

_INTEGER_KEY = re.compile(r'0|[1-9][0-9]*')


class DescribeError(Exception):
    pass


class UnknownType(DescribeError):
    def __init__(self, key, value=None):
        self.key = key
        self.kind = type(value).__name__
        super().__init__('Unknown type encountered for element %s (%s)' % (key, self.kind))


class EmptyList(DescribeError):
    def __init__(self, key):
        self.key = key
        super().__init__('Cannot describe empty list %s' % key)


class RootNotObject(DescribeError):
    def __init__(self, value):
        self.kind = type(value).__name__
        super().__init__('Response document must be a JSON object, got %s' % self.kind)


def build_primitive(type, data):
    return {
        'type': type,
        'example': data,
        'description': PLACEHOLDER,
    }


def classify(data, key, descriptions=None):
    # ! bool 是 int 的子类，必须先判断
    if isinstance(data, bool):
        return build_primitive('boolean', data)
    elif isinstance(data, int):
        return build_primitive('integer', data)
    elif isinstance(data, float):
        return build_primitive('number', data)
    elif isinstance(data, str):
        return build_primitive('string', data)
    elif isinstance(data, (list, dict)):
        return route(data, key, descriptions)
    else:
        raise UnknownType(key, data)


def is_dense_zero_based_sequence(keys):
    """keys 依次为 0, 1, ..., n-1 时才算列表

    形如 "0", "12" 的字符串 key 按整数处理，所以 {"0": .., "1": ..} 也是列表。
    """
    for expected, key in enumerate(keys):
        if isinstance(key, bool):
            return False
        if isinstance(key, str):
            if not _INTEGER_KEY.fullmatch(key):
                return False
            key = int(key)
        if key != expected:
            return False
    return True


def sequence_keys(data):
    if isinstance(data, dict):
        return data.keys()
    return range(len(data))


def route(data, key, descriptions=None):
    if is_dense_zero_based_sequence(sequence_keys(data)):
        try:
            return walk_array(data, key, descriptions)
        except EmptyList:
            logging.debug('empty list %s, items left as %s', key, PLACEHOLDER)
            return {
                'type': 'array',
                'items': PLACEHOLDER,
            }

    return build_object(walk_object(data, descriptions))


def build_object(properties):
    return {
        'type': 'object',
        'properties': properties,
        'required': list(properties),
    }


def walk_array(data, key, descriptions=None):
    """只取第一个元素推断 items

    第一个元素为空（"", 0, False, [], {} 等）时同样无法推断。
    """
    if isinstance(data, dict):
        data = list(data.values())

    if not data or not data[0]:
        raise EmptyList(key)

    return {
        'type': 'array',
        'items': classify(data[0], 0, descriptions),
    }


def walk_object(data, descriptions=None):
    properties = {}
    for name, value in data.items():
        schema = classify(value, name, descriptions)
        if descriptions and name in descriptions:
            schema.update(description=descriptions[name])
        properties[name] = schema
    return properties


def assemble(properties, description=DEFAULT_DESCRIPTION):
    return {
        STATUS_CODE: {
            'description': description,
            'content': {
                CONTENT_TYPE: {
                    'schema': {
                        'type': 'object',
                        'properties': properties,
                    },
                },
            },
        },
    }


def root_properties(data, descriptions=None):
    if not isinstance(data, dict):
        raise RootNotObject(data)
    return walk_object(data, descriptions)


def infer(data, descriptions=None, description=DEFAULT_DESCRIPTION):
    return assemble(root_properties(data, descriptions), description)
