"""Tests for parsing the single frames of the stacktrace, their parameters and generic lists"""
from __future__ import annotations

# Standard Imports

# Third-Party Imports
import pytest

# Monotrace Imports
from monotrace.parse import frame, signature
from monotrace.testing import asserts
from monotrace.utils.structs import ExceptionParameter


def test_split_generics():
    """Test splitting the generic lists into names"""
    assert signature.split_generics("") == ()
    assert signature.split_generics("   ") == ()
    assert signature.split_generics("T") == ("T",)
    assert signature.split_generics("TSource,TResult") == ("TSource", "TResult")
    assert signature.split_generics("TSource, TResult") == ("TSource", "TResult")
    # no deduplication and nested arguments are kept in their slot
    assert signature.split_generics("T,T") == ("T", "T")
    assert signature.split_generics("System.Collections.Generic.List`1[T], U") == (
        "System.Collections.Generic.List`1[T]",
        "U",
    )


def test_parse_parameter():
    """Test parsing the declarations of the parameters"""
    assert signature.parse_parameter("UnityEngine.Rect inRect") == ExceptionParameter(
        type="UnityEngine.Rect", name="inRect"
    )
    assert signature.parse_parameter("intptr") == ExceptionParameter(type="intptr")
    assert signature.parse_parameter("A.B`1[T] x") == ExceptionParameter(
        type="A.B`1", name="x", generic_parameters=("T",)
    )
    assert signature.parse_parameter(
        "System.Collections.Generic.Dictionary`2[System.String,System.Int32] lookup"
    ) == ExceptionParameter(
        type="System.Collections.Generic.Dictionary`2",
        name="lookup",
        generic_parameters=("System.String", "System.Int32"),
    )
    # arrays are not generics
    assert signature.parse_parameter("object[]") == ExceptionParameter(type="object[]")
    assert signature.parse_parameter("System.Byte[,] data") == ExceptionParameter(
        type="System.Byte[,]", name="data"
    )
    assert signature.parse_parameter("System.Exception&") == ExceptionParameter(
        type="System.Exception&"
    )


def test_parse_parameter_list():
    """Test parsing the whole lists of parameters, preserving the order"""
    assert signature.parse_parameter_list("") == ()
    params = signature.parse_parameter_list("A.B`1[T] x, C y")
    assert params == (
        ExceptionParameter(type="A.B`1", name="x", generic_parameters=("T",)),
        ExceptionParameter(type="C", name="y"),
    )
    params = signature.parse_parameter_list("UnityEngine.Rect,Framework.Listing")
    assert [param.type for param in params] == ["UnityEngine.Rect", "Framework.Listing"]
    assert all(param.name is None for param in params)


def test_parse_frame_basic():
    """Test parsing the common frame with parameters, IL offset and location"""
    method = frame.parse_frame(
        "  at Type.Method (A.B`1[T] x, C y) [0x0001f] in <f>:0"
    )
    assert method is not None
    asserts.frame_matches(method, "Type.Method", "0x0001f")
    assert method.parameters == (
        ExceptionParameter(type="A.B`1", name="x", generic_parameters=("T",)),
        ExceptionParameter(type="C", name="y"),
    )
    assert method.generic_parameters == ()
    assert not method.is_native_wrapper
    assert not method.is_dynamic_method

    method = frame.parse_frame(
        "  at Framework.WindowSettings.DoWindowContents (UnityEngine.Rect inRect) [0x000e5] in "
        "<2i3n2i23oi23oij2jo3ix>:0"
    )
    asserts.frame_matches(method, "Framework.WindowSettings.DoWindowContents", "0x000e5")
    assert method.type == "Framework.WindowSettings"
    assert method.method == "DoWindowContents"


def test_parse_frame_without_marker():
    """Test parsing the frames that are not prefixed with the at marker"""
    method = frame.parse_frame("Type.Method (A.B`1[T] x, C y) [0x0001f] in <f>:0")
    assert method is not None
    asserts.frame_matches(method, "Type.Method", "0x0001f")
    assert method.parameters == (
        ExceptionParameter(type="A.B`1", name="x", generic_parameters=("T",)),
        ExceptionParameter(type="C", name="y"),
    )

    method = frame.parse_frame(
        "(wrapper managed-to-native) System.Object.__icall_wrapper_mono_generic_class_init(intptr)"
    )
    assert method is not None
    assert method.is_native_wrapper
    assert method.type == "System.Object"
    assert method.method == "__icall_wrapper_mono_generic_class_init"
    assert method.parameters == (ExceptionParameter(type="intptr"),)


def test_parse_frame_special_names():
    """Test parsing the static constructors and constructors"""
    method = frame.parse_frame("  at Project.Mod.Data..cctor () [0x0019f] in <2938jm92j83>:0")
    assert method.type == "Project.Mod.Data"
    assert method.method == ".cctor"
    assert method.parameters == ()
    assert method.il_offset == "0x0019f"

    method = frame.parse_frame(
        "  at System.IO.FileStream..ctor (System.String path, System.IO.FileMode mode) [0x00164]"
        " in <filename unknown>:0"
    )
    assert method.type == "System.IO.FileStream"
    assert method.method == ".ctor"
    assert [param.name for param in method.parameters] == ["path", "mode"]


def test_parse_frame_generics():
    """Test parsing the generic methods and methods of generic types"""
    method = frame.parse_frame(
        "  at System.Linq.Enumerable.ToList[TSource] (System.Collections.Generic.IEnumerable`1[T]"
        " source) [0x0001f] in <23i82983m2oi3m9283>:0"
    )
    assert method.type == "System.Linq.Enumerable"
    assert method.method == "ToList"
    assert method.generic_parameters == ("TSource",)
    assert method.parameters[0].type == "System.Collections.Generic.IEnumerable`1"
    assert method.parameters[0].generic_parameters == ("T",)
    assert method.parameters[0].name == "source"

    method = frame.parse_frame(
        "  at System.Linq.Enumerable+WhereSelectListIterator`2[TSource,TResult].ToList () "
        "[0x00025] in <23423ebaes7878asebse3>:0"
    )
    assert method.type == "System.Linq.Enumerable+WhereSelectListIterator`2[TSource,TResult]"
    assert method.method == "ToList"
    assert method.generic_parameters == ()


def test_parse_frame_wrappers():
    """Test parsing the native wrappers and dynamic methods"""
    method = frame.parse_frame(
        "  at (wrapper managed-to-native) "
        "System.Object.__icall_wrapper_mono_generic_class_init(intptr)"
    )
    assert method.is_native_wrapper
    assert not method.is_dynamic_method
    assert method.type == "System.Object"
    assert method.method == "__icall_wrapper_mono_generic_class_init"
    assert method.parameters == (ExceptionParameter(type="intptr"),)
    assert method.il_offset is None

    method = frame.parse_frame(
        "  at (wrapper dynamic-method) Project.Mod.Settings.Settings_Object."
        "DoWindowContents_Patch0(UnityEngine.Rect,Framework.Listing)"
    )
    assert method.is_dynamic_method
    assert not method.is_native_wrapper
    assert method.type == "Project.Mod.Settings.Settings_Object"
    assert method.method == "DoWindowContents_Patch0"
    assert len(method.parameters) == 2

    # older runtimes separate the type of the icall by colon
    method = frame.parse_frame(
        "  at (wrapper managed-to-native) object:__icall_wrapper_mono_generic_class_init (intptr)"
    )
    assert method.is_native_wrapper
    assert method.type == "object"
    assert method.method == "__icall_wrapper_mono_generic_class_init"

    # other kinds of wrappers are stripped, without setting any flag
    method = frame.parse_frame(
        "  at (wrapper remoting-invoke-with-check) Game.Actor.Die () [0x00000] in <abc>:0"
    )
    asserts.frame_matches(method, "Game.Actor.Die", "0x00000")
    assert not method.is_native_wrapper and not method.is_dynamic_method


def test_parse_frame_locations():
    """Test that the location annotation is discarded in all of its forms"""
    method = frame.parse_frame(
        "  at Game.Inventory.Slots.Refresh (System.Boolean force) [0x0000a] in "
        "/builds/game/Inventory/Slots.cs:17"
    )
    asserts.frame_matches(method, "Game.Inventory.Slots.Refresh", "0x0000a")
    method = frame.parse_frame(
        "  at Game.Main.Run () [0x00001] in C:\\games in progress\\Main (x86).cs:3"
    )
    asserts.frame_matches(method, "Game.Main.Run", "0x00001")
    method = frame.parse_frame("  at Game.Main.Run () in <filename unknown>:0")
    asserts.frame_matches(method, "Game.Main.Run", None)
    method = frame.parse_frame("  at Game.Main.Run ()")
    asserts.frame_matches(method, "Game.Main.Run", None)


def test_parse_frame_lambdas():
    """Test parsing the compiler generated names of the lambdas and iterators"""
    method = frame.parse_frame(
        "  at Game.Loader+<>c__DisplayClass5_0.<LoadAll>b__0 (Game.Asset asset) [0x00012] in <x>:0"
    )
    assert method.type == "Game.Loader+<>c__DisplayClass5_0"
    assert method.method == "<LoadAll>b__0"

    method = frame.parse_frame(
        "  at Game.Loader+<Routine>d__12.MoveNext () [0x0004c] in <x>:0"
    )
    assert method.type == "Game.Loader+<Routine>d__12"
    assert method.method == "MoveNext"


@pytest.mark.parametrize(
    "line",
    [
        "",
        "   ",
        "   --- End of stack trace from previous location where exception was thrown ---",
        "Rethrow as InvalidOperationException: failed",
        "  at <0x00000> <unknown method>",
        "  at Game.Main.Run",
        "Game.Main.Run",
    ],
)
def test_parse_frame_not_frames(line):
    """Test that the lines that are not frames are not parsed"""
    assert frame.parse_frame(line) is None


def test_parse_frame_unqualified():
    """Test parsing the frame without the containing type"""
    method = frame.parse_frame("  at Run (System.String[] args) [0x00000] in <x>:0")
    assert method.type is None
    assert method.method == "Run"
    assert method.qualified_name == "Run"
    assert method.parameters == (ExceptionParameter(type="System.String[]", name="args"),)
