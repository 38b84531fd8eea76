"""The module contains the tests for the loader of the type-specific
part of the "add virtual host" form.
"""

# ruff: noqa: ANN001, ANN101, ANN201, ANN202, SLF001

import asyncio

import httpx

from brokerconsole.conf import settings
from brokerconsole.core.exceptions import MalformedResponse, NodeNotFound
from brokerconsole.core.resources import ResourceFragmentSource
from brokerconsole.test.base import BaseTestCase
from brokerconsole.test.utils import override_settings
from brokerconsole.virtualhost import TypeSpecificFormLoader, build_store_type_lookup
from brokerconsole.widgets import FilteringSelect, TextBox
from tests.base import ANOTHER_FRAGMENT, FRAGMENT, FRAGMENT_PATH, STORE_TYPES_PATH, TestPanel

_STORE_TYPES = ['Memory', 'BDB', 'JSON']


class TypeSpecificFormLoaderTests(BaseTestCase):
    """The class implements the tests for the type-specific form loader."""

    def setUp(self):
        """Initialize a console talking to a mock of the management API."""
        self.console = self.create_console()
        self.api.add_fragment(FRAGMENT_PATH, FRAGMENT)
        self.api.add_helper('ListMessageStoreTypes', _STORE_TYPES)
        self.loader = TypeSpecificFormLoader(self.console)

    def _get_container(self):
        return self.console.document.by_id(settings.TYPE_SPECIFIC_CONTAINER_ID)

    def _get_type_specific_ids(self):
        return [
            widget.id for widget in self.console.registry
            if widget.id.startswith(settings.TYPE_SPECIFIC_PREFIX)
        ]

    def _get_choosers(self):
        return [
            widget for widget in self.console.registry
            if isinstance(widget, FilteringSelect)
        ]

    def _serve_fragments(self, *fragments):
        remaining = list(fragments)

        def serve(_request):
            return httpx.Response(200, text=remaining.pop(0))

        self.api.route(FRAGMENT_PATH, serve)

    async def test_showing_form(self):
        """Test rendering the type-specific part of the form."""
        chooser = await self.loader.show()

        self.assertIs(chooser, self.loader.store_type_chooser)
        self.assertIs(self.console.registry.by_id(settings.STORE_TYPE_CHOOSER_ID), chooser)
        self.assertEqual(chooser.name, 'storeType')
        self.assertEqual(chooser.search_attr, 'name')
        self.assertFalse(chooser.required)
        self.assertTrue(chooser.started)
        self.assertFalse(self.loader.is_loading)

        placeholder = self.console.document.by_id(settings.STORE_TYPE_PLACEHOLDER_ID)
        self.assertIs(chooser.node.parent, placeholder)
        self.assertEqual(chooser.node.tag, 'input')
        self.assertTrue(self._get_container().contains(placeholder))

        self.assertEqual(
            self._get_type_specific_ids(),
            ['formAddVirtualHost.specific.storePath'],
        )
        self.assertEqual(
            [request.url.path for request in self.api.requests],
            ['/virtualhost/standard/add.html', '/rest/helper'],
        )

    async def test_store_type_lookup(self):
        """Test the options of the chooser keep the order reported by the API."""
        chooser = await self.loader.show()

        self.assertEqual(chooser.store.data, [
            {'id': 'Memory', 'name': 'Memory'},
            {'id': 'BDB', 'name': 'BDB'},
            {'id': 'JSON', 'name': 'JSON'},
        ])
        self.assertEqual([item['id'] for item in chooser.get_options('j')], ['JSON'])

    def test_building_store_type_lookup(self):
        """Test mapping the store type identifiers to the items of a store."""
        store = build_store_type_lookup(_STORE_TYPES)

        self.assertEqual(len(store), 3)
        self.assertEqual(store.get('BDB'), {'id': 'BDB', 'name': 'BDB'})
        self.assertEqual(len(build_store_type_lookup([])), 0)

    def test_building_store_type_lookup_from_repeated_types(self):
        """Test that a repeated store type yields a single item kept at
        the position where the type was first seen.
        """
        store = build_store_type_lookup(['Memory', 'BDB', 'Memory'])

        self.assertEqual(store.data, [
            {'id': 'Memory', 'name': 'Memory'},
            {'id': 'BDB', 'name': 'BDB'},
        ])

    async def test_empty_store_type_list(self):
        """Test the case when the broker reports no store types."""
        self.api.add_helper('ListMessageStoreTypes', [])

        chooser = await self.loader.show()

        self.assertEqual(chooser.get_options(), [])
        self.assertEqual(chooser.value, '')
        self.assertTrue(chooser.is_valid())

    async def test_showing_form_again(self):
        """Test that a repeated call leaves a single chooser and
        no widgets from the previous render.
        """
        first_chooser = await self.loader.show()
        first_text_box = self.console.registry.by_id('formAddVirtualHost.specific.storePath')

        second_chooser = await self.loader.show()

        self.assertIsNot(first_chooser, second_chooser)
        self.assertTrue(first_chooser.destroyed)
        self.assertIsNone(first_chooser.store)
        self.assertTrue(first_text_box.destroyed)
        self.assertEqual(self._get_choosers(), [second_chooser])
        self.assertEqual(
            self._get_type_specific_ids(),
            ['formAddVirtualHost.specific.storePath'],
        )

        await self.loader.show()
        self.assertEqual(len(self._get_choosers()), 1)

    async def test_showing_different_fragments(self):
        """Test that the container reflects only the latest fragment."""
        self._serve_fragments(FRAGMENT, ANOTHER_FRAGMENT, FRAGMENT)
        releases = TestPanel.releases

        await self.loader.show()
        await self.loader.show()

        container = self._get_container()
        self.assertEqual(
            self._get_type_specific_ids(),
            [
                'formAddVirtualHost.specific.panel',
                'formAddVirtualHost.specific.storeUnderlay',
            ],
        )
        self.assertIsNone(container.get_by_id('formAddVirtualHost.specific.storePath'))
        self.assertIn('formAddVirtualHost.specific.panel', container.inner_html)

        # The panel owns the chooser, so the chooser goes along with it.
        chooser = self.loader.store_type_chooser
        await self.loader.show()

        self.assertEqual(TestPanel.releases, releases + 1)
        self.assertTrue(chooser.destroyed)
        self.assertEqual(len(self._get_choosers()), 1)
        self.assertEqual(
            self._get_type_specific_ids(),
            ['formAddVirtualHost.specific.storePath'],
        )
        self.assertNotIn('formAddVirtualHost.specific.panel', container.inner_html)

    async def test_unrelated_widgets_survive(self):
        """Test that the widgets outside the type-specific namespace are kept."""
        name_box = TextBox(
            self.console.registry,
            self.console.document.by_id('formAddVirtualHost.name'),
        )

        await self.loader.show()
        await self.loader.show()

        self.assertFalse(name_box.destroyed)
        self.assertIs(self.console.registry.by_id('formAddVirtualHost.name'), name_box)
        self.assertIsNotNone(self.console.document.get_by_id('formAddVirtualHost.name'))

    async def test_fragment_failure(self):
        """Test that a failed fragment request is observable and
        no chooser is created.
        """
        self.api.add_fragment(FRAGMENT_PATH, 'Not found', status_code=404)

        with self.assertRaises(httpx.HTTPStatusError):
            await self.loader.show()

        self.assertIsNone(self.loader.store_type_chooser)
        self.assertEqual(self._get_choosers(), [])
        self.assertEqual(self._get_container().contents, [])
        self.assertFalse(self.loader.is_loading)

    async def test_store_types_failure(self):
        """Test that a failed store type request leaves no chooser behind."""
        first_chooser = await self.loader.show()
        self.api.add_helper('ListMessageStoreTypes', {'error': 'forbidden'}, status_code=403)

        with self.assertRaises(httpx.HTTPStatusError):
            await self.loader.show()

        self.assertTrue(first_chooser.destroyed)
        self.assertIsNone(self.loader.store_type_chooser)
        self.assertEqual(self._get_choosers(), [])

    async def test_malformed_store_types(self):
        """Test the case when the store types are not a JSON array."""
        self.api.add_helper('ListMessageStoreTypes', {'types': _STORE_TYPES})

        with self.assertRaises(MalformedResponse):
            await self.loader.show()

        self.assertIsNone(self.loader.store_type_chooser)

    async def test_missing_container(self):
        """Test the case when the dialog has no type-specific container."""
        self.console.document.inner_html = '<form id="formAddVirtualHost"></form>'

        with self.assertRaises(NodeNotFound):
            await self.loader.show()

        self.assertEqual(self.api.requests, [])

    async def test_missing_placeholder(self):
        """Test the case when the fragment has no placeholder for the chooser."""
        self.api.add_fragment(FRAGMENT_PATH, '<p>No store type</p>')

        with self.assertRaises(NodeNotFound):
            await self.loader.show()

        self.assertIsNone(self.loader.store_type_chooser)

    async def test_second_call_aborts_unfinished_one(self):
        """Test that a new call cancels the pipeline started by a previous one."""
        reached = asyncio.Event()
        calls = []

        async def list_store_types(_request):
            calls.append(_request)
            if len(calls) == 1:
                reached.set()
                await asyncio.Event().wait()

            return httpx.Response(200, json=_STORE_TYPES)

        self.api.route(STORE_TYPES_PATH, list_store_types)

        first_call = asyncio.ensure_future(self.loader.show())
        await reached.wait()
        self.assertTrue(self.loader.is_loading)

        chooser = await self.loader.show()

        with self.assertRaises(asyncio.CancelledError):
            await first_call

        self.assertEqual(len(calls), 2)
        self.assertIs(self.loader.store_type_chooser, chooser)
        self.assertEqual(self._get_choosers(), [chooser])
        self.assertFalse(self.loader.is_loading)

    async def test_overlapping_calls(self):
        """Test that only the latest of several overlapping calls
        renders the form.
        """
        async def get_fragment(_request):
            await asyncio.sleep(0.01)
            return httpx.Response(200, text=FRAGMENT)

        self.api.route(FRAGMENT_PATH, get_fragment)

        first_call = asyncio.ensure_future(self.loader.show())
        await asyncio.sleep(0)
        second_call = asyncio.ensure_future(self.loader.show())
        third_call = asyncio.ensure_future(self.loader.show())

        results = await asyncio.gather(
            first_call, second_call, third_call, return_exceptions=True,
        )

        self.assertIsInstance(results[0], asyncio.CancelledError)
        self.assertIsInstance(results[1], asyncio.CancelledError)
        self.assertIsInstance(results[2], FilteringSelect)
        self.assertIs(self.loader.store_type_chooser, results[2])
        self.assertFalse(results[2].destroyed)
        self.assertEqual(self._get_choosers(), [results[2]])
        self.assertEqual(
            self._get_type_specific_ids(),
            ['formAddVirtualHost.specific.storePath'],
        )
        self.assertFalse(self.loader.is_loading)

    async def test_cancelling(self):
        """Test aborting the pipeline explicitly."""
        reached = asyncio.Event()

        async def list_store_types(_request):
            reached.set()
            await asyncio.Event().wait()

        self.api.route(STORE_TYPES_PATH, list_store_types)

        call = asyncio.ensure_future(self.loader.show())
        await reached.wait()

        self.assertTrue(await self.loader.cancel())

        with self.assertRaises(asyncio.CancelledError):
            await call

        self.assertFalse(self.loader.is_loading)
        self.assertIsNone(self.loader.store_type_chooser)
        self.assertFalse(await self.loader.cancel())

    async def test_fragments_from_resources(self):
        """Test rendering the fragment shipped with the package."""
        console = self.create_console(fragment_source=ResourceFragmentSource())
        self.api.add_helper('ListMessageStoreTypes', _STORE_TYPES)
        loader = TypeSpecificFormLoader(console)

        first_chooser = await loader.show()
        second_chooser = await loader.show()

        self.assertTrue(first_chooser.destroyed)
        self.assertEqual(second_chooser.store.data[0], {'id': 'Memory', 'name': 'Memory'})
        self.assertEqual(self.api.requests[0].url.path, '/rest/helper')
        self.assertEqual(len(self.api.requests), 2)

        store_path = console.registry.by_id('formAddVirtualHost.specific.storePath')
        self.assertTrue(store_path.trim)
        self.assertEqual(
            store_path.node.get_attribute('placeholder'),
            'path/to/store',
        )

    @override_settings(VIRTUALHOST_TYPE='provided')
    async def test_virtual_host_type_from_settings(self):
        """Test requesting the fragment of the configured virtual host type."""
        self.api.add_fragment('/virtualhost/provided/add.html', FRAGMENT)
        loader = TypeSpecificFormLoader(self.console)

        await loader.show()

        self.assertEqual(loader.vhost_type, 'provided')
        self.assertEqual(self.api.requests[0].url.path, '/virtualhost/provided/add.html')
