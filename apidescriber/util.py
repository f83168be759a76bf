import json
import logging
import pprint
import sys
from pathlib import Path
from urllib.parse import urlparse

import apidescriber
import jsonschema
import pyaml
import requests
import yaml
from apidescriber.apischema import DescribeError

FORMATS = ('json', 'python', 'yaml')

SCHEMA_DIR = Path(__file__).resolve().parent / 'schema'


class DocumentDecodeFailure(DescribeError):
    pass


class InvalidSource(DescribeError):
    pass


class InvalidDescriptions(DescribeError):
    pass


def is_url(source):
    parsed = urlparse(source)
    return parsed.scheme in ('http', 'https') and bool(parsed.netloc)


def fetch_document(url, timeout=30):
    headers = {
        'Accept': 'application/json',
        'User-Agent': 'apidescribe/%s' % apidescriber.__version__,
    }
    logging.info('GET %s', url)
    try:
        response = requests.get(url, headers=headers, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise DocumentDecodeFailure('Failed to fetch %s: %s' % (url, e)) from e

    content_type = response.headers.get('Content-Type', '')
    if 'json' not in content_type.lower():
        logging.warning('unexpected content type %r from %s', content_type, url)

    # 按 Content-Type 中的 charset 解码
    return response.text


def read_document(source, timeout=30):
    """source 可以是 http(s) URL、文件路径或 - (标准输入)
    """
    if source == '-':
        return sys.stdin.read()

    if is_url(source):
        return fetch_document(source, timeout)

    # 单个字母的 scheme 当作 Windows 盘符
    scheme = urlparse(source).scheme
    if len(scheme) > 1:
        raise InvalidSource('Unsupported source %s, needs to be an absolute http(s) URL or a file' % source)

    try:
        return Path(source).read_text(encoding='utf-8')
    except OSError as e:
        raise InvalidSource('Cannot read %s: %s' % (source, e)) from e


def reject_constant(name):
    raise ValueError('%s is not valid JSON' % name)


def parse_document(text, source='-'):
    # NaN, Infinity 不是标准 JSON
    try:
        return json.loads(text, parse_constant=reject_constant)
    except ValueError as e:
        raise DocumentDecodeFailure('Failed to parse JSON output of %s: %s' % (source, e)) from e


def load_schema(name):
    with (SCHEMA_DIR / name).open(encoding='utf-8') as fp:
        return json.load(fp)


def load_descriptions(path):
    """属性说明文件，格式 yaml

    id: 对象标识
    name: 名称
    """
    try:
        with open(path, 'r', encoding='utf-8') as stream:
            descriptions = yaml.safe_load(stream)
    except (OSError, yaml.YAMLError) as e:
        raise InvalidDescriptions('Failed to load descriptions %s: %s' % (path, e)) from e

    if descriptions is None:
        return {}
    if isinstance(descriptions, dict):
        # yaml 中的数字 key 统一转为字符串
        descriptions = {str(name): value for name, value in descriptions.items()}

    try:
        jsonschema.validate(descriptions, load_schema('descriptions.json'))
    except jsonschema.ValidationError as e:
        raise InvalidDescriptions('Invalid descriptions %s: %s' % (path, e.message)) from e

    return descriptions


def render(data, format='json'):
    if format == 'json':
        return json.dumps(data, ensure_ascii=False, indent=4)
    elif format == 'python':
        return pprint.pformat(data, sort_dicts=False)
    elif format == 'yaml':
        return pyaml.dump(data, sort_keys=False)
    raise ValueError('Unknown output format: %s' % format)
