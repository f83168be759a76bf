"""API 响应结构描述生成工具

读取一个 API 的 JSON 响应，生成 OpenAPI responses 的草稿，再人工补充 TODO 部分。
"""
import logging

import apidescriber
import click
from apidescriber import apischema
from apidescriber import util


class ApiDescriber(object):
    def __init__(self, source, timeout=30, descriptions=None,
                 description=apischema.DEFAULT_DESCRIPTION):
        self.source = source
        self.description = description

        text = util.read_document(source, timeout)
        data = util.parse_document(text, source)
        self.properties = apischema.root_properties(data, descriptions)

    def describe(self):
        return apischema.assemble(self.properties, self.description)


def print_version(ctx, param, value):
    if not value or ctx.resilient_parsing:
        return
    click.echo('apidescribe %s' % apidescriber.__version__)
    ctx.exit()


@click.command()
@click.argument('source')
@click.option('--format', '-f', 'format_', type=click.Choice(util.FORMATS), default='json', help='输出格式.')
@click.option('--output', '-o', type=click.File('w', encoding='utf-8'), help='输出文件.')
@click.option('--description', default=apischema.DEFAULT_DESCRIPTION, help='响应说明.')
@click.option('--descriptions', '-D', 'descriptions_file', default=None, help='属性说明文件(yaml).')
@click.option('--timeout', '-t', default=30.0, help='请求超时(秒).')
@click.option('--debug', '-d', is_flag=True, help='是否输出调试信息.')
@click.option('--version', '-v', is_flag=True, is_eager=True, expose_value=False,
              callback=print_version, help='版本信息.')
def run(source, format_, output, description, descriptions_file, timeout, debug):
    log_format = '%(asctime)s - %(levelname)s - %(message)s'
    log_level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(level=log_level, format=log_format)

    logging.info('apidescribe-%s: %s', apidescriber.__version__, source)
    try:
        descriptions = util.load_descriptions(descriptions_file) if descriptions_file else None
        describer = ApiDescriber(source, timeout, descriptions, description)
        text = util.render(describer.describe(), format_)
    except apischema.DescribeError as e:
        raise click.ClickException(str(e))

    click.echo(text, file=output)


if __name__ == "__main__":
    run()
