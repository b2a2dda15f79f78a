"""
Generates Python gRPC stubs from proto/milvus.proto for the Milvus SDK.
"""
import subprocess
import sys
from pathlib import Path
import re

GENERATED_SUFFIXES = ("_pb2.py", "_pb2.pyi", "_pb2_grpc.py")

def post_process_generated_files(target_dir: Path):
    """
    Converts absolute imports in generated gRPC files to relative imports.
    e.g., 'import milvus_pb2 as milvus__pb2' becomes 'from . import milvus_pb2 as milvus__pb2'
    """
    print(f"Post-processing files in {target_dir}...")
    for filepath in list(target_dir.glob("*.py")) + list(target_dir.glob("*.pyi")):
        print(f"  Processing {filepath.name}")
        content = filepath.read_text()
        content = re.sub(
            r"^import (\w+_pb2(?:_grpc)?)\s+as\s+(\w+)",
            r"from . import \1 as \2",
            content,
            flags=re.MULTILINE,
        )
        filepath.write_text(content)
    print("Post-processing complete.")

def main():
    """Main function to generate gRPC stubs."""
    # Assuming this script is in <project root>/scripts/
    project_root = Path(__file__).parent.parent.resolve()
    proto_source_dir = project_root / "proto"
    output_dir = project_root / "milvus_sdk" / "_grpc"

    if not proto_source_dir.exists():
        print(f"Error: Proto source directory not found: {proto_source_dir}")
        sys.exit(1)

    # Only generated modules are replaced; the package __init__.py stays.
    output_dir.mkdir(parents=True, exist_ok=True)
    for filepath in output_dir.iterdir():
        if filepath.name.endswith(GENERATED_SUFFIXES):
            print(f"Removing stale {filepath.name}")
            filepath.unlink()

    try:
        import grpc_tools.protoc # type: ignore  # noqa: F401
    except ImportError:
        print("Error: grpcio-tools is not installed. Please install it (`poetry install --with dev`).")
        sys.exit(1)

    proto_files_to_compile = [str(p.relative_to(proto_source_dir)) for p in proto_source_dir.glob("*.proto")]

    if not proto_files_to_compile:
        print(f"No .proto files found in {proto_source_dir}")
        sys.exit(1)

    print(f"Found proto files: {proto_files_to_compile}")
    print(f"Proto include path: {proto_source_dir}")
    print(f"Output directory: {output_dir}")

    protoc_command = [
        sys.executable,
        "-m", "grpc_tools.protoc",
        f"-I{proto_source_dir}",
        f"--python_out={output_dir}",
        f"--pyi_out={output_dir}",
        f"--grpc_python_out={output_dir}",
    ] + proto_files_to_compile

    print(f"Running command: {' '.join(protoc_command)}")

    try:
        process = subprocess.run(protoc_command, capture_output=True, text=True, check=True)
        print("gRPC stubs generated successfully.")
        if process.stdout:
            print("protoc stdout:\n", process.stdout)
        if process.stderr:
            print("protoc stderr:\n", process.stderr)

        (output_dir / "__init__.py").touch(exist_ok=True)
        post_process_generated_files(output_dir)

    except subprocess.CalledProcessError as e:
        print(f"Error generating gRPC stubs: {e}")
        print("stdout:\n", e.stdout)
        print("stderr:\n", e.stderr)
        sys.exit(1)
    except FileNotFoundError:
        print("Error: python or grpc_tools.protoc not found. Make sure Python and grpcio-tools are in your PATH.")
        sys.exit(1)

if __name__ == "__main__":
    main()
