"""Structural pattern demonstrations."""

from patterncatalog.application.decorators import DemoContext, demonstration
from patterncatalog.application.dto.responses import PatternCategory
from patterncatalog.domain.structural.adapter import ListView, ListViewDataAdapter, RemoteData
from patterncatalog.domain.structural.bridge import AdvancedRemote, Tv
from patterncatalog.domain.structural.composite import LineView, TextView, ViewGroup
from patterncatalog.domain.structural.decorator import (
    CompressionDecorator,
    ConsoleDataSource,
    EncryptionDecorator,
)
from patterncatalog.domain.structural.proxy import ProxyFileStore, ThirdPartyFileStoreImpl

STRUCTURAL = PatternCategory.STRUCTURAL


@demonstration("adapter", STRUCTURAL, "Show remote records in a list view")
def adapter_demo(context: DemoContext) -> None:
    list_view = ListView(context.output)
    remote_list = [
        RemoteData(remote_title="Breaking news", remote_content="broken news"),
        RemoteData(remote_title="Hello", remote_content="World"),
    ]
    list_view_data_adapter = ListViewDataAdapter()
    list_view.show_list_view_data(list_view_data_adapter.adapt_all(remote_list))


@demonstration("bridge", STRUCTURAL, "Advanced remote driving a TV")
def bridge_demo(context: DemoContext) -> None:
    device = Tv(context.output)
    advanced_remote = AdvancedRemote(device)
    advanced_remote.mute()
    advanced_remote.channel_up()
    device.print_status()


@demonstration("composite", STRUCTURAL, "Nested view groups drawn recursively")
def composite_demo(context: DemoContext) -> None:
    out = context.output
    first_view_group = ViewGroup(
        1, 0, [LineView(10, 10, out), TextView(10, 20, "Hello", out)], out
    )
    second_view_group = ViewGroup(
        2, 0, [first_view_group, TextView(30, 30, "World", out)], out
    )
    second_view_group.draw()


@demonstration("decorator", STRUCTURAL, "Encrypting and compressing a data source")
def decorator_demo(context: DemoContext) -> None:
    out = context.output
    plain_data_source = ConsoleDataSource(out)
    plain_data_source.write_data("Important info")

    encrypted_data_source = EncryptionDecorator(plain_data_source)
    encrypted_data_source.write_data("Important info")
    out.write(f"Got decrypted data: {encrypted_data_source.read_data()}")

    stacked = CompressionDecorator(EncryptionDecorator(plain_data_source))
    stacked.write_data("Important info")
    out.write(f"Got decompressed data: {stacked.read_data()}")


@demonstration("proxy", STRUCTURAL, "Proxy adding decoding to a file store")
def proxy_demo(context: DemoContext) -> None:
    proxy = ProxyFileStore(ThirdPartyFileStoreImpl())
    context.output.write(f"Got file {proxy.get_file()}")
    context.output.write(f"Got file {proxy.get_file_and_decode()}")
