"""
Tests for SceneCompiler.

Covers the document structure, every layer and shape branch, the defs
block, and the determinism, visibility, paint order and transform
omission properties.
"""

import pytest

from logoforge.animation import AnimationSettings
from logoforge.color import ColorSettings, ColorStop, GradientSettings
from logoforge.effects import ShadowEffect, StrokeEffect, VisualEffects
from logoforge.layers import (
    BackgroundLayer,
    FontSettings,
    IconLayer,
    ShapeLayer,
    ShapeStroke,
    TextLayer,
)
from logoforge.rendering import MappingIconRenderer, SceneCompiler, compile_scene
from logoforge.scene import CanvasSettings, Scene
from logoforge.transform import LayerTransform


def red_blue_gradient() -> ColorSettings:
    return ColorSettings.from_gradient(GradientSettings(stops=[
        ColorStop(color='#ff0000', position=0),
        ColorStop(color='#0000ff', position=100),
    ]))


def scene_of(*layers, width=100, height=100) -> Scene:
    return Scene(canvas_settings=CanvasSettings(width=width, height=height), layers=list(layers))


class TestDocumentStructure:
    """Root element, defs and fragment order."""

    def test_empty_scene(self, compiler):
        assert compiler.compile(scene_of(width=400, height=300)) == (
            '<svg width="400" height="300" viewBox="0 0 400 300" xmlns="http://www.w3.org/2000/svg">\n'
            '<defs></defs>\n'
            '</svg>'
        )

    def test_no_xml_prolog(self, compiler, hello_scene):
        assert compiler.compile(hello_scene).startswith('<svg ')

    def test_background_and_text_scenario(self, compiler, hello_scene):
        svg = compiler.compile(hello_scene)
        assert svg.startswith('<svg width="100" height="100"')
        rect = '<rect x="0" y="0" width="100" height="100" fill="#ffffff"'
        assert rect in svg
        assert '>Hi</text>' in svg
        assert svg.index(rect) < svg.index('>Hi</text>')

    def test_defs_hold_gradients_before_filters(self, compiler):
        svg = compiler.compile(scene_of(
            ShapeLayer(id='s1', effects=VisualEffects(blur=2)),
            ShapeLayer(id='s2', fill=red_blue_gradient(), z_index=1),
        ))
        defs = svg[svg.index('<defs>'):svg.index('</defs>')]
        assert defs.index('<linearGradient id="gradient-s2-fill"') < defs.index('<filter id="filter-s1"')

    def test_compile_scene_shortcut(self, hello_scene):
        assert compile_scene(hello_scene) == SceneCompiler().compile(hello_scene)

    def test_compile_does_not_mutate_scene(self, compiler, hello_scene):
        before = hello_scene.to_api_dict()
        compiler.compile(hello_scene)
        assert hello_scene.to_api_dict() == before


class TestProperties:
    """Determinism, visibility, paint order and transform omission."""

    def test_determinism(self, compiler):
        scene = scene_of(
            BackgroundLayer(id='bg', fill=red_blue_gradient()),
            ShapeLayer(id='s', shape_type='star', z_index=2, effects=VisualEffects(hue=15)),
            TextLayer(id='t', content='Logo', z_index=1, transform=LayerTransform(x=3.333333, rotation=10)),
            IconLayer(id='i', icon_name='bolt', z_index=3),
        )
        assert compiler.compile(scene) == compiler.compile(scene)
        assert compiler.compile(scene) == SceneCompiler().compile(scene.snapshot())

    def test_hidden_layer_leaves_no_trace(self, compiler):
        hidden = ShapeLayer(
            id='hidden-shape',
            visible=False,
            fill=red_blue_gradient(),
            effects=VisualEffects(shadow=ShadowEffect(enabled=True)),
        )
        svg = compiler.compile(scene_of(hidden, ShapeLayer(id='shown', z_index=1)))
        assert 'hidden-shape' not in svg
        assert '<linearGradient' not in svg
        assert '<filter' not in svg

    def test_paint_order_follows_z_index(self, compiler):
        top = ShapeLayer(id='top', fill=ColorSettings.from_hex('#aaaaaa'), z_index=5)
        bottom = ShapeLayer(id='bottom', fill=ColorSettings.from_hex('#bbbbbb'), z_index=1)
        svg = compiler.compile(scene_of(top, bottom))
        assert svg.index('#bbbbbb') < svg.index('#aaaaaa')

    def test_equal_z_index_keeps_array_order(self, compiler):
        first = ShapeLayer(id='first', fill=ColorSettings.from_hex('#111111'), z_index=1)
        second = ShapeLayer(id='second', fill=ColorSettings.from_hex('#222222'), z_index=1)
        svg = compiler.compile(scene_of(first, second))
        assert svg.index('#111111') < svg.index('#222222')

    def test_identity_transform_is_omitted(self, compiler):
        svg = compiler.compile(scene_of(
            ShapeLayer(id='s'),
            TextLayer(id='t', content='x'),
            IconLayer(id='i', icon_name='a'),
        ))
        assert 'transform=' not in svg

    def test_gradient_per_occurrence(self, compiler):
        svg = compiler.compile(scene_of(
            ShapeLayer(id='a', fill=red_blue_gradient()),
            ShapeLayer(id='b', fill=red_blue_gradient(), z_index=1),
        ))
        assert svg.count('<linearGradient') == 2
        assert 'fill="url(#gradient-a-fill)"' in svg
        assert 'fill="url(#gradient-b-fill)"' in svg


class TestShapes:
    """Shape geometry per shapeType."""

    def shape_markup(self, compiler, **kwargs) -> str:
        svg = compiler.compile(scene_of(ShapeLayer(id='s', **kwargs)))
        return svg.split('\n')[2]

    def test_rectangle_with_corner_radius(self, compiler):
        markup = self.shape_markup(
            compiler, width=50, height=30, corner_radius=8, transform=LayerTransform(x=10, y=20),
        )
        assert markup == (
            '<rect x="10" y="20" width="50" height="30" rx="8" fill="#cccccc" '
            'opacity="1" transform="translate(10, 20)"/>'
        )

    def test_rectangle_without_corner_radius(self, compiler):
        assert 'rx=' not in self.shape_markup(compiler)

    def test_circle(self, compiler):
        markup = self.shape_markup(compiler, shape_type='circle', width=100, height=60)
        assert markup.startswith('<circle cx="50" cy="30" r="30"')

    def test_ellipse(self, compiler):
        markup = self.shape_markup(compiler, shape_type='ellipse', width=100, height=60)
        assert markup.startswith('<ellipse cx="50" cy="30" rx="50" ry="30"')

    def test_triangle(self, compiler):
        markup = self.shape_markup(compiler, shape_type='triangle', width=100, height=100)
        assert markup.startswith('<polygon points="50,0 0,100 100,100"')

    def test_polygon_starts_at_top_clockwise(self, compiler):
        markup = self.shape_markup(compiler, shape_type='polygon', sides=4, width=100, height=100)
        assert markup.startswith('<polygon points="50,0 100,50 50,100 0,50"')

    def test_polygon_default_sides(self, compiler):
        markup = self.shape_markup(compiler, shape_type='polygon')
        points = markup.split('points="')[1].split('"')[0]
        assert len(points.split(' ')) == 6

    def test_polygon_without_sides_degrades(self, compiler):
        markup = self.shape_markup(compiler, shape_type='polygon', sides=0)
        assert markup.startswith('<polygon points=""')

    def test_star_alternates_radii(self, compiler):
        markup = self.shape_markup(
            compiler, shape_type='star', sides=5, inner_radius=0.5, width=100, height=100,
        )
        points = markup.split('points="')[1].split('"')[0].split(' ')
        assert len(points) == 10
        assert points[0] == '50,0'
        assert points[5] == '50,75'

    def test_custom_path(self, compiler):
        markup = self.shape_markup(compiler, shape_type='custom', path='M0 0L10 10Z')
        assert markup.startswith('<path d="M0 0L10 10Z"')

    def test_custom_without_path_draws_nothing(self, compiler):
        svg = compiler.compile(scene_of(ShapeLayer(id='s', shape_type='custom')))
        assert svg.count('\n') == 2

    def test_stroke_when_enabled(self, compiler):
        stroke = ShapeStroke(enabled=True, color=ColorSettings.from_hex('#ff0000'), width=2)
        markup = self.shape_markup(compiler, stroke=stroke)
        assert 'stroke="#ff0000" stroke-width="2"' in markup

    @pytest.mark.parametrize('stroke', [
        ShapeStroke(enabled=False, width=2),
        ShapeStroke(enabled=True, width=0),
        None,
    ])
    def test_no_stroke(self, compiler, stroke):
        assert 'stroke' not in self.shape_markup(compiler, stroke=stroke)

    def test_stroke_gradient_gets_own_def(self, compiler):
        stroke = ShapeStroke(enabled=True, color=red_blue_gradient(), width=1)
        svg = compiler.compile(scene_of(ShapeLayer(id='s', fill=red_blue_gradient(), stroke=stroke)))
        assert 'id="gradient-s-fill"' in svg
        assert 'id="gradient-s-stroke"' in svg
        assert 'stroke="url(#gradient-s-stroke)"' in svg

    def test_fill_opacity(self, compiler):
        markup = self.shape_markup(compiler, fill=ColorSettings.from_hex('#000000', opacity=0.25))
        assert 'fill="#000000" fill-opacity="0.25"' in markup

    def test_layer_opacity_filter_and_blend_mode(self, compiler):
        markup = self.shape_markup(
            compiler,
            opacity=0.5,
            blend_mode='multiply',
            effects=VisualEffects(blur=3),
        )
        assert 'opacity="0.5"' in markup
        assert 'filter="url(#filter-s)"' in markup
        assert 'style="mix-blend-mode: multiply"' in markup

    def test_negative_size_is_rendered_as_given(self, compiler):
        markup = self.shape_markup(compiler, width=-10, height=20)
        assert 'width="-10"' in markup


class TestTextIconBackground:
    """Text, icon and background fragments."""

    def test_text_attributes(self, compiler):
        layer = TextLayer(
            id='t',
            content='Acme',
            font=FontSettings(family='Roboto', size=24, weight=700, style='italic'),
            color=ColorSettings.from_hex('#123456'),
            text_align='left',
            vertical_align='top',
        )
        svg = compiler.compile(scene_of(layer))
        assert (
            '<text x="0" y="0" font-family="Roboto" font-size="24" font-weight="700" '
            'font-style="italic" text-anchor="start" dominant-baseline="hanging" '
            'fill="#123456" opacity="1">Acme</text>'
        ) in svg

    @pytest.mark.parametrize('align, anchor', [
        ('center', 'middle'),
        ('right', 'end'),
        ('justify', 'start'),
    ])
    def test_text_anchor(self, compiler, align, anchor):
        svg = compiler.compile(scene_of(TextLayer(id='t', content='x', text_align=align)))
        assert f'text-anchor="{anchor}"' in svg

    def test_text_is_escaped(self, compiler):
        svg = compiler.compile(scene_of(TextLayer(id='t', content='A & <B>')))
        assert '>A &amp; &lt;B&gt;</text>' in svg

    def test_text_transform(self, compiler):
        layer = TextLayer(id='t', content='big', font=FontSettings(text_transform='uppercase'))
        assert '>BIG</text>' in compiler.compile(scene_of(layer))

    def test_empty_text(self, compiler):
        svg = compiler.compile(scene_of(TextLayer(id='t', content='')))
        assert '<text ' in svg

    def test_text_stroke_from_effects(self, compiler):
        stroke = StrokeEffect(enabled=True, width=1.5, color=ColorSettings.from_hex('#ffffff'))
        layer = TextLayer(id='t', content='x', effects=VisualEffects(stroke=stroke))
        svg = compiler.compile(scene_of(layer))
        assert 'stroke="#ffffff" stroke-width="1.5"' in svg
        assert '<filter' not in svg

    def test_icon_placeholder(self, compiler):
        svg = compiler.compile(scene_of(IconLayer(id='i', icon_name='star', size=48)))
        assert (
            '<g opacity="1"><rect x="0" y="0" width="48" height="48" fill="#333333" rx="4"/>'
            '<text x="24" y="24" text-anchor="middle" dominant-baseline="central" '
            'font-size="28.8" fill="white">S</text></g>'
        ) in svg

    def test_icon_without_name(self, compiler):
        svg = compiler.compile(scene_of(IconLayer(id='i', icon_name='')))
        assert '>?</text>' in svg

    def test_icon_renderer(self):
        compiler = SceneCompiler(icon_renderer=MappingIconRenderer({'star': 'M12 2L15 9Z'}))
        svg = compiler.compile(scene_of(
            IconLayer(id='known', icon_name='star', size=48),
            IconLayer(id='unknown', icon_name='moon', z_index=1),
        ))
        assert '<path d="M12 2L15 9Z" fill="#333333" transform="translate(0, 0) scale(2)"/>' in svg
        assert '>M</text>' in svg

    def test_background_covers_canvas_and_ignores_transform(self, compiler):
        layer = BackgroundLayer(
            id='bg',
            fill=ColorSettings.from_hex('#eeeeee'),
            transform=LayerTransform(x=30, y=30, rotation=45),
        )
        svg = compiler.compile(scene_of(layer, width=320, height=200))
        assert '<rect x="0" y="0" width="320" height="200" fill="#eeeeee" opacity="1"/>' in svg
        assert 'transform=' not in svg

    def test_background_gradient(self, compiler):
        svg = compiler.compile(scene_of(BackgroundLayer(id='bg', fill=red_blue_gradient())))
        assert 'fill="url(#gradient-bg-fill)"' in svg
        assert '<linearGradient id="gradient-bg-fill"' in svg


class TestAnimation:
    """Animation child elements."""

    def test_fade(self, compiler):
        layer = ShapeLayer(id='s', animation=AnimationSettings(animation_type='fade', iterations='infinite'))
        svg = compiler.compile(scene_of(layer))
        assert (
            '<animate attributeName="opacity" values="0;1" dur="1s" begin="0s" '
            'repeatCount="indefinite"/></rect>'
        ) in svg

    def test_rotate(self, compiler):
        animation = AnimationSettings(animation_type='rotate', duration=2.5, delay=0.5, iterations=3)
        svg = compiler.compile(scene_of(ShapeLayer(id='s', animation=animation)))
        assert (
            '<animateTransform attributeName="transform" type="rotate" additive="sum" '
            'values="0;360" dur="2.5s" begin="0.5s" repeatCount="3"/>'
        ) in svg

    def test_disabled_animation(self, compiler):
        animation = AnimationSettings(animation_type='pulse', enabled=False)
        svg = compiler.compile(scene_of(ShapeLayer(id='s', animation=animation)))
        assert '<animate' not in svg

    def test_no_animation_by_default(self, compiler, hello_scene):
        assert '<animate' not in compiler.compile(hello_scene)
