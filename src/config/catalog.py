"""
Fixed catalog of GPU benchmarking and tuning applications.

Order matters: entries are installed top to bottom.
"""

from src.entities.AppDescriptor import AppDescriptor

DEFAULT_CATALOG: tuple[AppDescriptor, ...] = (
    AppDescriptor(
        name="TechPowerUp GPU-Z",
        package_id="TechPowerUp.GPU-Z",
    ),
    AppDescriptor(
        name="CPU-Z",
        package_id="CPUID.CPU-Z",
    ),
    AppDescriptor(
        name="HWiNFO",
        package_id="REALiX.HWiNFO",
    ),
    AppDescriptor(
        name="MSI Afterburner",
        package_id="Guru3D.Afterburner",
        version="4.6.5",
        fallback_url="https://download.msi.com/uti_exe/vga/MSIAfterburnerSetup.zip",
        silent_args="/S",
    ),
    AppDescriptor(
        name="FurMark 2",
        package_id="Geeks3D.FurMark.2",
    ),
    AppDescriptor(
        name="OCCT",
        package_id="OCBase.OCCT.Personal",
    ),
    AppDescriptor(
        name="Unigine Superposition",
        package_id="Unigine.SuperpositionBenchmark",
        fallback_url="https://assets.unigine.com/d/Unigine_Superposition-1.1.exe",
        silent_args="/VERYSILENT /SUPPRESSMSGBOXES /NORESTART",
    ),
    AppDescriptor(
        name="Unigine Heaven",
        package_id="Unigine.HeavenBenchmark",
        fallback_url="https://assets.unigine.com/d/Unigine_Heaven-4.0.exe",
        silent_args="/VERYSILENT /SUPPRESSMSGBOXES /NORESTART",
    ),
    AppDescriptor(
        name="Unigine Valley",
        package_id="Unigine.ValleyBenchmark",
        fallback_url="https://assets.unigine.com/d/Unigine_Valley-1.0.exe",
        silent_args="/VERYSILENT /SUPPRESSMSGBOXES /NORESTART",
    ),
    AppDescriptor(
        name="CapFrameX",
        package_id="CXWorld.CapFrameX",
    ),
    AppDescriptor(
        name="NVCleanstall",
        package_id="TechPowerUp.NVCleanstall",
    ),
    AppDescriptor(
        name="Display Driver Uninstaller",
        package_id="Wagnardsoft.DisplayDriverUninstaller",
    ),
    AppDescriptor(
        name="AIDA64 Extreme",
        package_id="FinalWire.AIDA64.Extreme",
        fallback_url="https://download.aida64.com/aida64extreme760.exe",
        silent_args="/SILENT /NORESTART",
    ),
    AppDescriptor(
        name="3DMark Demo",
        fallback_url="https://benchmarks.ul.com/downloads/3dmark-setup.zip",
        silent_args="/quiet /norestart",
    ),
)
