# targetinfo - compiler target triple decomposition
# Licensed under MIT

# This file is generated from the target list of a reference compiler,
# including targets it has since removed. Do not edit it by hand.

from .target import TargetInfo

# (triple, TargetInfo, features)
LIST = (
    (
        'aarch64-apple-darwin',
        TargetInfo(
            full_arch='aarch64',
            arch='aarch64',
            vendor='apple',
            os='macos',
            env='',
            abi='',
        ),
        'aes,crc,dit,dotprod,dpb,dpb2,fcma,fhm,flagm,fp16,frintts,jsconv,lor,lse,neon,paca,pacg,pan,rcpc,rcpc2,rdm,sb,sha2,sha3,ssbs',
    ),
    (
        'aarch64-apple-ios',
        TargetInfo(
            full_arch='aarch64',
            arch='aarch64',
            vendor='apple',
            os='ios',
            env='',
            abi='',
        ),
        'aes,crc,dpb,fp16,lor,lse,neon,pan,rdm,sha2',
    ),
    (
        'aarch64-apple-ios-macabi',
        TargetInfo(
            full_arch='aarch64',
            arch='aarch64',
            vendor='apple',
            os='ios',
            env='',
            abi='macabi',
        ),
        'aes,crc,dpb,fp16,lor,lse,neon,pan,rdm,sha2',
    ),
    (
        'aarch64-apple-ios-sim',
        TargetInfo(
            full_arch='aarch64',
            arch='aarch64',
            vendor='apple',
            os='ios',
            env='',
            abi='sim',
        ),
        'aes,crc,dit,dotprod,dpb,fcma,fhm,fp16,lor,lse,neon,pan,rcpc,rdm,sha2,sha3',
    ),
    (
        'aarch64-apple-tvos',
        TargetInfo(
            full_arch='aarch64',
            arch='aarch64',
            vendor='apple',
            os='tvos',
            env='',
            abi='',
        ),
        'aes,crc,dpb,fp16,lor,lse,neon,pan,rdm,sha2',
    ),
    (
        'aarch64-apple-tvos-sim',
        TargetInfo(
            full_arch='aarch64',
            arch='aarch64',
            vendor='apple',
            os='tvos',
            env='',
            abi='sim',
        ),
        'aes,crc,dpb,fp16,lor,lse,neon,pan,rdm,sha2',
    ),
    (
        'aarch64-apple-visionos',
        TargetInfo(
            full_arch='aarch64',
            arch='aarch64',
            vendor='apple',
            os='visionos',
            env='',
            abi='',
        ),
        'aes,crc,dit,dotprod,dpb,fcma,fhm,fp16,lor,lse,neon,pan,rcpc,rdm,sha2,sha3',
    ),
    (
        'aarch64-apple-watchos',
        TargetInfo(
            full_arch='aarch64',
            arch='aarch64',
            vendor='apple',
            os='watchos',
            env='',
            abi='',
        ),
        'aes,crc,dpb,fp16,lor,lse,neon,pan,rdm,sha2',
    ),
    (
        'aarch64-kmc-solid_asp3',
        TargetInfo(
            full_arch='aarch64',
            arch='aarch64',
            vendor='kmc',
            os='solid_asp3',
            env='',
            abi='',
        ),
        'neon',
    ),
    (
        'aarch64-linux-android',
        TargetInfo(
            full_arch='aarch64',
            arch='aarch64',
            vendor='unknown',
            os='android',
            env='',
            abi='',
        ),
        'neon',
    ),
    (
        'aarch64-nintendo-switch-freestanding',
        TargetInfo(
            full_arch='aarch64',
            arch='aarch64',
            vendor='nintendo',
            os='horizon',
            env='',
            abi='',
        ),
        'aes,crc,neon,sha2',
    ),
    (
        'aarch64-pc-windows-gnullvm',
        TargetInfo(
            full_arch='aarch64',
            arch='aarch64',
            vendor='pc',
            os='windows',
            env='gnu',
            abi='llvm',
        ),
        'neon',
    ),
    (
        'aarch64-pc-windows-msvc',
        TargetInfo(
            full_arch='aarch64',
            arch='aarch64',
            vendor='pc',
            os='windows',
            env='msvc',
            abi='',
        ),
        'neon',
    ),
    (
        'aarch64-unknown-freebsd',
        TargetInfo(
            full_arch='aarch64',
            arch='aarch64',
            vendor='unknown',
            os='freebsd',
            env='',
            abi='',
        ),
        'neon',
    ),
    (
        'aarch64-unknown-fuchsia',
        TargetInfo(
            full_arch='aarch64',
            arch='aarch64',
            vendor='unknown',
            os='fuchsia',
            env='',
            abi='',
        ),
        'crc,neon',
    ),
    (
        'aarch64-unknown-hermit',
        TargetInfo(
            full_arch='aarch64',
            arch='aarch64',
            vendor='unknown',
            os='hermit',
            env='',
            abi='',
        ),
        'neon',
    ),
    (
        'aarch64-unknown-illumos',
        TargetInfo(
            full_arch='aarch64',
            arch='aarch64',
            vendor='unknown',
            os='illumos',
            env='',
            abi='',
        ),
        'neon',
    ),
    (
        'aarch64-unknown-linux-gnu',
        TargetInfo(
            full_arch='aarch64',
            arch='aarch64',
            vendor='unknown',
            os='linux',
            env='gnu',
            abi='',
        ),
        'neon',
    ),
    (
        'aarch64-unknown-linux-gnu_ilp32',
        TargetInfo(
            full_arch='aarch64',
            arch='aarch64',
            vendor='unknown',
            os='linux',
            env='gnu',
            abi='ilp32',
        ),
        'neon',
    ),
    (
        'aarch64-unknown-linux-musl',
        TargetInfo(
            full_arch='aarch64',
            arch='aarch64',
            vendor='unknown',
            os='linux',
            env='musl',
            abi='',
        ),
        'neon',
    ),
    (
        'aarch64-unknown-linux-ohos',
        TargetInfo(
            full_arch='aarch64',
            arch='aarch64',
            vendor='unknown',
            os='linux',
            env='ohos',
            abi='',
        ),
        'neon',
    ),
    (
        'aarch64-unknown-netbsd',
        TargetInfo(
            full_arch='aarch64',
            arch='aarch64',
            vendor='unknown',
            os='netbsd',
            env='',
            abi='',
        ),
        'neon',
    ),
    (
        'aarch64-unknown-none',
        TargetInfo(
            full_arch='aarch64',
            arch='aarch64',
            vendor='unknown',
            os='none',
            env='',
            abi='',
        ),
        'neon',
    ),
    (
        'aarch64-unknown-none-softfloat',
        TargetInfo(
            full_arch='aarch64',
            arch='aarch64',
            vendor='unknown',
            os='none',
            env='',
            abi='softfloat',
        ),
        '',
    ),
    (
        'aarch64-unknown-nto-qnx710',
        TargetInfo(
            full_arch='aarch64',
            arch='aarch64',
            vendor='unknown',
            os='nto',
            env='nto71',
            abi='',
        ),
        'neon',
    ),
    (
        'aarch64-unknown-nto-qnx800',
        TargetInfo(
            full_arch='aarch64',
            arch='aarch64',
            vendor='unknown',
            os='nto',
            env='nto80',
            abi='',
        ),
        'neon',
    ),
    (
        'aarch64-unknown-nuttx',
        TargetInfo(
            full_arch='aarch64',
            arch='aarch64',
            vendor='unknown',
            os='nuttx',
            env='',
            abi='',
        ),
        'neon',
    ),
    (
        'aarch64-unknown-openbsd',
        TargetInfo(
            full_arch='aarch64',
            arch='aarch64',
            vendor='unknown',
            os='openbsd',
            env='',
            abi='',
        ),
        'neon',
    ),
    (
        'aarch64-unknown-redox',
        TargetInfo(
            full_arch='aarch64',
            arch='aarch64',
            vendor='unknown',
            os='redox',
            env='relibc',
            abi='',
        ),
        'neon',
    ),
    (
        'aarch64-unknown-teeos',
        TargetInfo(
            full_arch='aarch64',
            arch='aarch64',
            vendor='unknown',
            os='teeos',
            env='',
            abi='',
        ),
        'neon',
    ),
    (
        'aarch64-unknown-trusty',
        TargetInfo(
            full_arch='aarch64',
            arch='aarch64',
            vendor='unknown',
            os='trusty',
            env='',
            abi='',
        ),
        'neon',
    ),
    (
        'aarch64-unknown-uefi',
        TargetInfo(
            full_arch='aarch64',
            arch='aarch64',
            vendor='unknown',
            os='uefi',
            env='',
            abi='',
        ),
        'neon',
    ),
    (
        'aarch64-uwp-windows-msvc',
        TargetInfo(
            full_arch='aarch64',
            arch='aarch64',
            vendor='uwp',
            os='windows',
            env='msvc',
            abi='uwp',
        ),
        'neon',
    ),
    (
        'aarch64_be-unknown-linux-gnu',
        TargetInfo(
            full_arch='aarch64_be',
            arch='aarch64',
            vendor='unknown',
            os='linux',
            env='gnu',
            abi='',
        ),
        'neon',
    ),
    (
        'amdgcn-amd-amdhsa',
        TargetInfo(
            full_arch='amdgcn',
            arch='amdgpu',
            vendor='amd',
            os='amdhsa',
            env='',
            abi='',
        ),
        '',
    ),
    (
        'arm-linux-androideabi',
        TargetInfo(
            full_arch='arm',
            arch='arm',
            vendor='unknown',
            os='android',
            env='',
            abi='eabi',
        ),
        'v5te',
    ),
    (
        'arm-unknown-linux-gnueabi',
        TargetInfo(
            full_arch='arm',
            arch='arm',
            vendor='unknown',
            os='linux',
            env='gnu',
            abi='eabi',
        ),
        'v5te,v6',
    ),
    (
        'arm-unknown-linux-gnueabihf',
        TargetInfo(
            full_arch='arm',
            arch='arm',
            vendor='unknown',
            os='linux',
            env='gnu',
            abi='eabihf',
        ),
        'v5te,v6,vfp2',
    ),
    (
        'arm-unknown-linux-musleabihf',
        TargetInfo(
            full_arch='arm',
            arch='arm',
            vendor='unknown',
            os='linux',
            env='musl',
            abi='eabihf',
        ),
        'v5te,v6,vfp2',
    ),
    (
        'arm64_32-apple-watchos',
        TargetInfo(
            full_arch='arm64_32',
            arch='aarch64',
            vendor='apple',
            os='watchos',
            env='',
            abi='',
        ),
        'aes,crc,dpb,fp16,lor,lse,neon,pan,rdm,sha2',
    ),
    (
        'arm64e-apple-darwin',
        TargetInfo(
            full_arch='arm64e',
            arch='aarch64',
            vendor='apple',
            os='macos',
            env='',
            abi='',
        ),
        'aes,crc,dit,dotprod,dpb,dpb2,fcma,fhm,flagm,fp16,frintts,jsconv,lor,lse,neon,paca,pacg,pan,rcpc,rcpc2,rdm,sb,sha2,sha3,ssbs',
    ),
    (
        'arm64e-apple-ios',
        TargetInfo(
            full_arch='arm64e',
            arch='aarch64',
            vendor='apple',
            os='ios',
            env='',
            abi='',
        ),
        'aes,crc,dpb,fp16,lor,lse,neon,paca,pacg,pan,rcpc,rdm,sha2',
    ),
    (
        'arm64ec-pc-windows-msvc',
        TargetInfo(
            full_arch='arm64ec',
            arch='arm64ec',
            vendor='pc',
            os='windows',
            env='msvc',
            abi='',
        ),
        'neon',
    ),
    (
        'armeb-unknown-linux-gnueabi',
        TargetInfo(
            full_arch='armeb',
            arch='arm',
            vendor='unknown',
            os='linux',
            env='gnu',
            abi='eabi',
        ),
        'v5te',
    ),
    (
        'armebv7r-none-eabihf',
        TargetInfo(
            full_arch='armebv7r',
            arch='arm',
            vendor='unknown',
            os='none',
            env='',
            abi='eabihf',
        ),
        'mclass,rclass,thumb-mode,thumb2,v5te,v6,v6k,v6t2,v7,vfp2,vfp3',
    ),
    (
        'armv4t-none-eabi',
        TargetInfo(
            full_arch='armv4t',
            arch='arm',
            vendor='unknown',
            os='none',
            env='',
            abi='eabi',
        ),
        '',
    ),
    (
        'armv5te-unknown-linux-gnueabi',
        TargetInfo(
            full_arch='armv5te',
            arch='arm',
            vendor='unknown',
            os='linux',
            env='gnu',
            abi='eabi',
        ),
        'v5te',
    ),
    (
        'armv5te-unknown-linux-uclibceabi',
        TargetInfo(
            full_arch='armv5te',
            arch='arm',
            vendor='unknown',
            os='linux',
            env='uclibc',
            abi='eabi',
        ),
        'v5te',
    ),
    (
        'armv6-unknown-freebsd',
        TargetInfo(
            full_arch='armv6',
            arch='arm',
            vendor='unknown',
            os='freebsd',
            env='',
            abi='eabihf',
        ),
        'v5te,v6,vfp2',
    ),
    (
        'armv6k-nintendo-3ds',
        TargetInfo(
            full_arch='armv6k',
            arch='arm',
            vendor='nintendo',
            os='horizon',
            env='newlib',
            abi='eabihf',
        ),
        'v5te,v6,v6k,vfp2',
    ),
    (
        'armv7-apple-ios',
        TargetInfo(
            full_arch='armv7',
            arch='arm',
            vendor='apple',
            os='ios',
            env='',
            abi='',
        ),
        'neon,thumb2,v5te,v6,v6k,v6t2,v7,vfp2,vfp3',
    ),
    (
        'armv7-linux-androideabi',
        TargetInfo(
            full_arch='armv7',
            arch='arm',
            vendor='unknown',
            os='android',
            env='',
            abi='eabi',
        ),
        'd32,neon,thumb2,v5te,v6,v6k,v6t2,v7,vfp2,vfp3',
    ),
    (
        'armv7-rtems-eabihf',
        TargetInfo(
            full_arch='armv7',
            arch='arm',
            vendor='unknown',
            os='rtems',
            env='newlib',
            abi='eabihf',
        ),
        'thumb2,v5te,v6,v6k,v6t2,v7,vfp2,vfp3',
    ),
    (
        'armv7-sony-vita-newlibeabihf',
        TargetInfo(
            full_arch='armv7',
            arch='arm',
            vendor='sony',
            os='vita',
            env='newlib',
            abi='eabihf',
        ),
        'd32,neon,thumb2,v5te,v6,v6k,v6t2,v7,vfp2,vfp3',
    ),
    (
        'armv7-unknown-freebsd',
        TargetInfo(
            full_arch='armv7',
            arch='arm',
            vendor='unknown',
            os='freebsd',
            env='',
            abi='eabihf',
        ),
        'd32,neon,thumb2,v5te,v6,v6k,v6t2,v7,vfp2,vfp3',
    ),
    (
        'armv7-unknown-linux-gnueabihf',
        TargetInfo(
            full_arch='armv7',
            arch='arm',
            vendor='unknown',
            os='linux',
            env='gnu',
            abi='eabihf',
        ),
        'd32,thumb2,v5te,v6,v6k,v6t2,v7,vfp2,vfp3',
    ),
    (
        'armv7-unknown-linux-musleabihf',
        TargetInfo(
            full_arch='armv7',
            arch='arm',
            vendor='unknown',
            os='linux',
            env='musl',
            abi='eabihf',
        ),
        'd32,thumb2,v5te,v6,v6k,v6t2,v7,vfp2,vfp3',
    ),
    (
        'armv7-unknown-linux-ohos',
        TargetInfo(
            full_arch='armv7',
            arch='arm',
            vendor='unknown',
            os='linux',
            env='ohos',
            abi='eabi',
        ),
        'd32,neon,thumb2,v5te,v6,v6k,v6t2,v7,vfp2,vfp3',
    ),
    (
        'armv7-unknown-linux-uclibceabihf',
        TargetInfo(
            full_arch='armv7',
            arch='arm',
            vendor='unknown',
            os='linux',
            env='uclibc',
            abi='eabihf',
        ),
        'd32,thumb2,v5te,v6,v6k,v6t2,v7,vfp2,vfp3',
    ),
    (
        'armv7-unknown-trusty',
        TargetInfo(
            full_arch='armv7',
            arch='arm',
            vendor='unknown',
            os='trusty',
            env='',
            abi='eabi',
        ),
        'd32,neon,thumb2,v5te,v6,v6k,v6t2,v7,vfp2,vfp3',
    ),
    (
        'armv7-wrs-vxworks-eabihf',
        TargetInfo(
            full_arch='armv7',
            arch='arm',
            vendor='wrs',
            os='vxworks',
            env='gnu',
            abi='eabihf',
        ),
        'd32,thumb2,v5te,v6,v6k,v6t2,v7,vfp2,vfp3',
    ),
    (
        'armv7a-none-eabi',
        TargetInfo(
            full_arch='armv7a',
            arch='arm',
            vendor='unknown',
            os='none',
            env='',
            abi='eabi',
        ),
        'thumb2,v5te,v6,v6k,v6t2,v7',
    ),
    (
        'armv7k-apple-watchos',
        TargetInfo(
            full_arch='armv7k',
            arch='arm',
            vendor='apple',
            os='watchos',
            env='',
            abi='',
        ),
        'd32,neon,thumb2,v5te,v6,v6k,v6t2,v7,vfp2,vfp3',
    ),
    (
        'armv7s-apple-ios',
        TargetInfo(
            full_arch='armv7s',
            arch='arm',
            vendor='apple',
            os='ios',
            env='',
            abi='',
        ),
        'd32,neon,thumb2,v5te,v6,v6k,v6t2,v7,vfp2,vfp3',
    ),
    (
        'asmjs-unknown-emscripten',
        TargetInfo(
            full_arch='asmjs',
            arch='wasm32',
            vendor='unknown',
            os='emscripten',
            env='',
            abi='',
        ),
        '',
    ),
    (
        'avr-none',
        TargetInfo(
            full_arch='avr',
            arch='avr',
            vendor='unknown',
            os='none',
            env='',
            abi='',
        ),
        '',
    ),
    (
        'bpfeb-unknown-none',
        TargetInfo(
            full_arch='bpfeb',
            arch='bpf',
            vendor='unknown',
            os='none',
            env='',
            abi='',
        ),
        '',
    ),
    (
        'bpfel-unknown-none',
        TargetInfo(
            full_arch='bpfel',
            arch='bpf',
            vendor='unknown',
            os='none',
            env='',
            abi='',
        ),
        '',
    ),
    (
        'csky-unknown-linux-gnuabiv2',
        TargetInfo(
            full_arch='csky',
            arch='csky',
            vendor='unknown',
            os='linux',
            env='gnu',
            abi='abiv2',
        ),
        '',
    ),
    (
        'hexagon-unknown-linux-musl',
        TargetInfo(
            full_arch='hexagon',
            arch='hexagon',
            vendor='unknown',
            os='linux',
            env='musl',
            abi='',
        ),
        'v60,v62,v65,v66,v67,v68',
    ),
    (
        'i386-apple-ios',
        TargetInfo(
            full_arch='i386',
            arch='x86',
            vendor='apple',
            os='ios',
            env='',
            abi='sim',
        ),
        'fxsr,sse,sse2,sse3,ssse3,x87',
    ),
    (
        'i586-unknown-linux-gnu',
        TargetInfo(
            full_arch='i586',
            arch='x86',
            vendor='unknown',
            os='linux',
            env='gnu',
            abi='',
        ),
        'x87',
    ),
    (
        'i686-apple-darwin',
        TargetInfo(
            full_arch='i686',
            arch='x86',
            vendor='apple',
            os='macos',
            env='',
            abi='',
        ),
        'fxsr,sse,sse2,sse3,ssse3,x87',
    ),
    (
        'i686-apple-ios',
        TargetInfo(
            full_arch='i686',
            arch='x86',
            vendor='apple',
            os='ios',
            env='',
            abi='sim',
        ),
        'fxsr,sse,sse2,sse3,ssse3,x87',
    ),
    (
        'i686-linux-android',
        TargetInfo(
            full_arch='i686',
            arch='x86',
            vendor='unknown',
            os='android',
            env='',
            abi='',
        ),
        'fxsr,sse,sse2,sse3,ssse3,x87',
    ),
    (
        'i686-pc-nto-qnx700',
        TargetInfo(
            full_arch='i686',
            arch='x86',
            vendor='pc',
            os='nto',
            env='nto70',
            abi='',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'i686-pc-windows-gnu',
        TargetInfo(
            full_arch='i686',
            arch='x86',
            vendor='pc',
            os='windows',
            env='gnu',
            abi='',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'i686-pc-windows-msvc',
        TargetInfo(
            full_arch='i686',
            arch='x86',
            vendor='pc',
            os='windows',
            env='msvc',
            abi='',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'i686-unknown-freebsd',
        TargetInfo(
            full_arch='i686',
            arch='x86',
            vendor='unknown',
            os='freebsd',
            env='',
            abi='',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'i686-unknown-haiku',
        TargetInfo(
            full_arch='i686',
            arch='x86',
            vendor='unknown',
            os='haiku',
            env='',
            abi='',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'i686-unknown-linux-gnu',
        TargetInfo(
            full_arch='i686',
            arch='x86',
            vendor='unknown',
            os='linux',
            env='gnu',
            abi='',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'i686-unknown-linux-musl',
        TargetInfo(
            full_arch='i686',
            arch='x86',
            vendor='unknown',
            os='linux',
            env='musl',
            abi='',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'i686-unknown-netbsd',
        TargetInfo(
            full_arch='i686',
            arch='x86',
            vendor='unknown',
            os='netbsd',
            env='',
            abi='',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'i686-unknown-uefi',
        TargetInfo(
            full_arch='i686',
            arch='x86',
            vendor='unknown',
            os='uefi',
            env='',
            abi='',
        ),
        'x87',
    ),
    (
        'i686-win7-windows-msvc',
        TargetInfo(
            full_arch='i686',
            arch='x86',
            vendor='win7',
            os='windows',
            env='msvc',
            abi='',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'loongarch64-unknown-linux-gnu',
        TargetInfo(
            full_arch='loongarch64',
            arch='loongarch64',
            vendor='unknown',
            os='linux',
            env='gnu',
            abi='',
        ),
        'd,f,lsx,ual',
    ),
    (
        'loongarch64-unknown-linux-musl',
        TargetInfo(
            full_arch='loongarch64',
            arch='loongarch64',
            vendor='unknown',
            os='linux',
            env='musl',
            abi='',
        ),
        'd,f,lsx,ual',
    ),
    (
        'loongarch64-unknown-none-softfloat',
        TargetInfo(
            full_arch='loongarch64',
            arch='loongarch64',
            vendor='unknown',
            os='none',
            env='',
            abi='softfloat',
        ),
        'ual',
    ),
    (
        'm68k-unknown-linux-gnu',
        TargetInfo(
            full_arch='m68k',
            arch='m68k',
            vendor='unknown',
            os='linux',
            env='gnu',
            abi='',
        ),
        '',
    ),
    (
        'mips-unknown-linux-gnu',
        TargetInfo(
            full_arch='mips',
            arch='mips',
            vendor='unknown',
            os='linux',
            env='gnu',
            abi='',
        ),
        'fp64,mips2,mips32r2',
    ),
    (
        'mips-unknown-linux-uclibc',
        TargetInfo(
            full_arch='mips',
            arch='mips',
            vendor='unknown',
            os='linux',
            env='uclibc',
            abi='',
        ),
        'fp64,mips2,mips32r2',
    ),
    (
        'mips64-openwrt-linux-musl',
        TargetInfo(
            full_arch='mips64',
            arch='mips64',
            vendor='unknown',
            os='linux',
            env='musl',
            abi='abi64',
        ),
        'fp64,mips64r2',
    ),
    (
        'mips64-unknown-linux-gnuabi64',
        TargetInfo(
            full_arch='mips64',
            arch='mips64',
            vendor='unknown',
            os='linux',
            env='gnu',
            abi='abi64',
        ),
        'fp64,mips64r2',
    ),
    (
        'mips64el-unknown-linux-muslabi64',
        TargetInfo(
            full_arch='mips64el',
            arch='mips64',
            vendor='unknown',
            os='linux',
            env='musl',
            abi='abi64',
        ),
        'fp64,mips64r2',
    ),
    (
        'mipsel-sony-psp',
        TargetInfo(
            full_arch='mipsel',
            arch='mips',
            vendor='sony',
            os='psp',
            env='',
            abi='',
        ),
        'mips2',
    ),
    (
        'mipsel-unknown-linux-musl',
        TargetInfo(
            full_arch='mipsel',
            arch='mips',
            vendor='unknown',
            os='linux',
            env='musl',
            abi='',
        ),
        'fp64,mips2,mips32r2',
    ),
    (
        'mipsel-unknown-none',
        TargetInfo(
            full_arch='mipsel',
            arch='mips',
            vendor='unknown',
            os='none',
            env='',
            abi='',
        ),
        'fp64,mips2,mips32r2',
    ),
    (
        'mipsisa32r6-unknown-linux-gnu',
        TargetInfo(
            full_arch='mipsisa32r6',
            arch='mips32r6',
            vendor='unknown',
            os='linux',
            env='gnu',
            abi='',
        ),
        'fp64,mips32r6',
    ),
    (
        'mipsisa64r6el-unknown-linux-gnuabi64',
        TargetInfo(
            full_arch='mipsisa64r6el',
            arch='mips64r6',
            vendor='unknown',
            os='linux',
            env='gnu',
            abi='abi64',
        ),
        'fp64,mips64r6',
    ),
    (
        'msp430-none-elf',
        TargetInfo(
            full_arch='msp430',
            arch='msp430',
            vendor='unknown',
            os='none',
            env='',
            abi='',
        ),
        '',
    ),
    (
        'nvptx64-nvidia-cuda',
        TargetInfo(
            full_arch='nvptx64',
            arch='nvptx64',
            vendor='nvidia',
            os='cuda',
            env='',
            abi='',
        ),
        '',
    ),
    (
        'powerpc-unknown-linux-gnu',
        TargetInfo(
            full_arch='powerpc',
            arch='powerpc',
            vendor='unknown',
            os='linux',
            env='gnu',
            abi='',
        ),
        '',
    ),
    (
        'powerpc-unknown-linux-gnuspe',
        TargetInfo(
            full_arch='powerpc',
            arch='powerpc',
            vendor='unknown',
            os='linux',
            env='gnu',
            abi='spe',
        ),
        '',
    ),
    (
        'powerpc-unknown-linux-muslspe',
        TargetInfo(
            full_arch='powerpc',
            arch='powerpc',
            vendor='unknown',
            os='linux',
            env='musl',
            abi='spe',
        ),
        '',
    ),
    (
        'powerpc-wrs-vxworks-spe',
        TargetInfo(
            full_arch='powerpc',
            arch='powerpc',
            vendor='wrs',
            os='vxworks',
            env='gnu',
            abi='spe',
        ),
        '',
    ),
    (
        'powerpc64-ibm-aix',
        TargetInfo(
            full_arch='powerpc64',
            arch='powerpc64',
            vendor='ibm',
            os='aix',
            env='',
            abi='vec-extabi',
        ),
        'altivec',
    ),
    (
        'powerpc64-unknown-freebsd',
        TargetInfo(
            full_arch='powerpc64',
            arch='powerpc64',
            vendor='unknown',
            os='freebsd',
            env='',
            abi='',
        ),
        '',
    ),
    (
        'powerpc64-unknown-linux-gnu',
        TargetInfo(
            full_arch='powerpc64',
            arch='powerpc64',
            vendor='unknown',
            os='linux',
            env='gnu',
            abi='',
        ),
        '',
    ),
    (
        'powerpc64le-unknown-linux-gnu',
        TargetInfo(
            full_arch='powerpc64le',
            arch='powerpc64',
            vendor='unknown',
            os='linux',
            env='gnu',
            abi='',
        ),
        'altivec,vsx',
    ),
    (
        'powerpc64le-unknown-linux-musl',
        TargetInfo(
            full_arch='powerpc64le',
            arch='powerpc64',
            vendor='unknown',
            os='linux',
            env='musl',
            abi='',
        ),
        'altivec,vsx',
    ),
    (
        'riscv32e-unknown-none-elf',
        TargetInfo(
            full_arch='riscv32e',
            arch='riscv32',
            vendor='unknown',
            os='none',
            env='',
            abi='ilp32e',
        ),
        'e',
    ),
    (
        'riscv32em-unknown-none-elf',
        TargetInfo(
            full_arch='riscv32em',
            arch='riscv32',
            vendor='unknown',
            os='none',
            env='',
            abi='ilp32e',
        ),
        'e,m,zmmul',
    ),
    (
        'riscv32emc-unknown-none-elf',
        TargetInfo(
            full_arch='riscv32emc',
            arch='riscv32',
            vendor='unknown',
            os='none',
            env='',
            abi='ilp32e',
        ),
        'c,e,m,zmmul',
    ),
    (
        'riscv32i-unknown-none-elf',
        TargetInfo(
            full_arch='riscv32i',
            arch='riscv32',
            vendor='unknown',
            os='none',
            env='',
            abi='',
        ),
        '',
    ),
    (
        'riscv32imac-unknown-none-elf',
        TargetInfo(
            full_arch='riscv32imac',
            arch='riscv32',
            vendor='unknown',
            os='none',
            env='',
            abi='',
        ),
        'a,c,m,zmmul',
    ),
    (
        'riscv32imac-unknown-nuttx-elf',
        TargetInfo(
            full_arch='riscv32imac',
            arch='riscv32',
            vendor='unknown',
            os='nuttx',
            env='',
            abi='',
        ),
        'a,c,m,zmmul',
    ),
    (
        'riscv32imc-esp-espidf',
        TargetInfo(
            full_arch='riscv32imc',
            arch='riscv32',
            vendor='espressif',
            os='espidf',
            env='newlib',
            abi='',
        ),
        'c,m,zmmul',
    ),
    (
        'riscv64-linux-android',
        TargetInfo(
            full_arch='riscv64',
            arch='riscv64',
            vendor='unknown',
            os='android',
            env='',
            abi='',
        ),
        'a,c,d,f,m,v,zicsr,zifencei,zmmul',
    ),
    (
        'riscv64gc-unknown-freebsd',
        TargetInfo(
            full_arch='riscv64gc',
            arch='riscv64',
            vendor='unknown',
            os='freebsd',
            env='',
            abi='',
        ),
        'a,c,d,f,m,zicsr,zifencei,zmmul',
    ),
    (
        'riscv64gc-unknown-linux-gnu',
        TargetInfo(
            full_arch='riscv64gc',
            arch='riscv64',
            vendor='unknown',
            os='linux',
            env='gnu',
            abi='',
        ),
        'a,c,d,f,m,zicsr,zifencei,zmmul',
    ),
    (
        'riscv64gc-unknown-linux-musl',
        TargetInfo(
            full_arch='riscv64gc',
            arch='riscv64',
            vendor='unknown',
            os='linux',
            env='musl',
            abi='',
        ),
        'a,c,d,f,m,zicsr,zifencei,zmmul',
    ),
    (
        'riscv64gc-unknown-none-elf',
        TargetInfo(
            full_arch='riscv64gc',
            arch='riscv64',
            vendor='unknown',
            os='none',
            env='',
            abi='',
        ),
        'a,c,d,f,m,zicsr,zifencei,zmmul',
    ),
    (
        'riscv64imac-unknown-none-elf',
        TargetInfo(
            full_arch='riscv64imac',
            arch='riscv64',
            vendor='unknown',
            os='none',
            env='',
            abi='',
        ),
        'a,c,m,zmmul',
    ),
    (
        's390x-unknown-linux-gnu',
        TargetInfo(
            full_arch='s390x',
            arch='s390x',
            vendor='unknown',
            os='linux',
            env='gnu',
            abi='',
        ),
        '',
    ),
    (
        's390x-unknown-linux-musl',
        TargetInfo(
            full_arch='s390x',
            arch='s390x',
            vendor='unknown',
            os='linux',
            env='musl',
            abi='',
        ),
        '',
    ),
    (
        'sparc-unknown-linux-gnu',
        TargetInfo(
            full_arch='sparc',
            arch='sparc',
            vendor='unknown',
            os='linux',
            env='gnu',
            abi='',
        ),
        '',
    ),
    (
        'sparc-unknown-none-elf',
        TargetInfo(
            full_arch='sparc',
            arch='sparc',
            vendor='unknown',
            os='none',
            env='',
            abi='',
        ),
        '',
    ),
    (
        'sparc64-unknown-linux-gnu',
        TargetInfo(
            full_arch='sparc64',
            arch='sparc64',
            vendor='unknown',
            os='linux',
            env='gnu',
            abi='',
        ),
        '',
    ),
    (
        'sparcv9-sun-solaris',
        TargetInfo(
            full_arch='sparcv9',
            arch='sparc64',
            vendor='sun',
            os='solaris',
            env='',
            abi='',
        ),
        '',
    ),
    (
        'thumbv6m-none-eabi',
        TargetInfo(
            full_arch='thumbv6m',
            arch='arm',
            vendor='unknown',
            os='none',
            env='',
            abi='eabi',
        ),
        'mclass,thumb-mode,v5te,v6',
    ),
    (
        'thumbv7a-pc-windows-msvc',
        TargetInfo(
            full_arch='thumbv7a',
            arch='arm',
            vendor='pc',
            os='windows',
            env='msvc',
            abi='',
        ),
        'd32,neon,thumb-mode,thumb2,v5te,v6,v6k,v6t2,v7,vfp2,vfp3',
    ),
    (
        'thumbv7em-none-eabihf',
        TargetInfo(
            full_arch='thumbv7em',
            arch='arm',
            vendor='unknown',
            os='none',
            env='',
            abi='eabihf',
        ),
        'dsp,mclass,thumb-mode,thumb2,v5te,v6,v6k,v6t2,v7,vfp2',
    ),
    (
        'thumbv7m-none-eabi',
        TargetInfo(
            full_arch='thumbv7m',
            arch='arm',
            vendor='unknown',
            os='none',
            env='',
            abi='eabi',
        ),
        'mclass,thumb-mode,thumb2,v5te,v6,v6k,v6t2,v7',
    ),
    (
        'thumbv7neon-linux-androideabi',
        TargetInfo(
            full_arch='thumbv7neon',
            arch='arm',
            vendor='unknown',
            os='android',
            env='',
            abi='eabi',
        ),
        'd32,neon,thumb-mode,thumb2,v5te,v6,v6k,v6t2,v7,vfp2,vfp3',
    ),
    (
        'thumbv7neon-unknown-linux-gnueabihf',
        TargetInfo(
            full_arch='thumbv7neon',
            arch='arm',
            vendor='unknown',
            os='linux',
            env='gnu',
            abi='eabihf',
        ),
        'd32,neon,thumb-mode,thumb2,v5te,v6,v6k,v6t2,v7,vfp2,vfp3',
    ),
    (
        'thumbv8m.main-none-eabihf',
        TargetInfo(
            full_arch='thumbv8m.main',
            arch='arm',
            vendor='unknown',
            os='none',
            env='',
            abi='eabihf',
        ),
        'mclass,thumb-mode,thumb2,v5te,v6,v6k,v6t2,v7,v8,vfp2',
    ),
    (
        'wasm32-unknown-emscripten',
        TargetInfo(
            full_arch='wasm32',
            arch='wasm32',
            vendor='unknown',
            os='emscripten',
            env='',
            abi='',
        ),
        'bulk-memory,multivalue,mutable-globals,nontrapping-fptoint,reference-types,sign-ext',
    ),
    (
        'wasm32-unknown-unknown',
        TargetInfo(
            full_arch='wasm32',
            arch='wasm32',
            vendor='unknown',
            os='unknown',
            env='',
            abi='',
        ),
        'bulk-memory,multivalue,mutable-globals,nontrapping-fptoint,reference-types,sign-ext',
    ),
    (
        'wasm32-wasi',
        TargetInfo(
            full_arch='wasm32',
            arch='wasm32',
            vendor='unknown',
            os='wasi',
            env='',
            abi='',
        ),
        'mutable-globals,sign-ext',
    ),
    (
        'wasm32-wasip1',
        TargetInfo(
            full_arch='wasm32',
            arch='wasm32',
            vendor='unknown',
            os='wasi',
            env='p1',
            abi='',
        ),
        'bulk-memory,multivalue,mutable-globals,nontrapping-fptoint,reference-types,sign-ext',
    ),
    (
        'wasm32-wasip1-threads',
        TargetInfo(
            full_arch='wasm32',
            arch='wasm32',
            vendor='unknown',
            os='wasi',
            env='p1',
            abi='',
        ),
        'atomics,bulk-memory,multivalue,mutable-globals,nontrapping-fptoint,reference-types,sign-ext',
    ),
    (
        'wasm32-wasip2',
        TargetInfo(
            full_arch='wasm32',
            arch='wasm32',
            vendor='unknown',
            os='wasi',
            env='p2',
            abi='',
        ),
        'bulk-memory,multivalue,mutable-globals,nontrapping-fptoint,reference-types,sign-ext',
    ),
    (
        'wasm32v1-none',
        TargetInfo(
            full_arch='wasm32v1',
            arch='wasm32',
            vendor='unknown',
            os='none',
            env='',
            abi='',
        ),
        'mutable-globals',
    ),
    (
        'wasm64-unknown-unknown',
        TargetInfo(
            full_arch='wasm64',
            arch='wasm64',
            vendor='unknown',
            os='unknown',
            env='',
            abi='',
        ),
        'bulk-memory,multivalue,mutable-globals,nontrapping-fptoint,reference-types,sign-ext',
    ),
    (
        'x86_64-apple-darwin',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='apple',
            os='macos',
            env='',
            abi='',
        ),
        'cmpxchg16b,fxsr,sse,sse2,sse3,sse4.1,ssse3,x87',
    ),
    (
        'x86_64-apple-ios',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='apple',
            os='ios',
            env='',
            abi='sim',
        ),
        'cmpxchg16b,fxsr,sse,sse2,sse3,sse4.1,ssse3,x87',
    ),
    (
        'x86_64-apple-ios-macabi',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='apple',
            os='ios',
            env='',
            abi='macabi',
        ),
        'cmpxchg16b,fxsr,sse,sse2,sse3,sse4.1,ssse3,x87',
    ),
    (
        'x86_64-apple-tvos',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='apple',
            os='tvos',
            env='',
            abi='sim',
        ),
        'cmpxchg16b,fxsr,sse,sse2,sse3,sse4.1,ssse3,x87',
    ),
    (
        'x86_64-apple-watchos-sim',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='apple',
            os='watchos',
            env='',
            abi='sim',
        ),
        'cmpxchg16b,fxsr,sse,sse2,sse3,sse4.1,ssse3,x87',
    ),
    (
        'x86_64-fortanix-unknown-sgx',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='fortanix',
            os='unknown',
            env='sgx',
            abi='fortanix',
        ),
        'cmpxchg16b,fxsr,sse,sse2,sse3,x87',
    ),
    (
        'x86_64-linux-android',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='unknown',
            os='android',
            env='',
            abi='',
        ),
        'cmpxchg16b,fxsr,popcnt,sse,sse2,sse3,sse4.1,sse4.2,ssse3,x87',
    ),
    (
        'x86_64-lynx-lynxos178',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='lynx',
            os='lynxos178',
            env='',
            abi='',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'x86_64-pc-nto-qnx710',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='pc',
            os='nto',
            env='nto71',
            abi='',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'x86_64-pc-nto-qnx710_iosock',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='pc',
            os='nto',
            env='nto71_iosock',
            abi='',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'x86_64-pc-solaris',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='pc',
            os='solaris',
            env='',
            abi='',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'x86_64-pc-windows-gnu',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='pc',
            os='windows',
            env='gnu',
            abi='',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'x86_64-pc-windows-gnullvm',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='pc',
            os='windows',
            env='gnu',
            abi='llvm',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'x86_64-pc-windows-msvc',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='pc',
            os='windows',
            env='msvc',
            abi='',
        ),
        'cmpxchg16b,fxsr,sse,sse2,sse3,x87',
    ),
    (
        'x86_64-rumprun-netbsd',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='rumprun',
            os='netbsd',
            env='',
            abi='',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'x86_64-sun-solaris',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='sun',
            os='solaris',
            env='',
            abi='',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'x86_64-unikraft-linux-musl',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='unikraft',
            os='linux',
            env='musl',
            abi='',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'x86_64-unknown-dragonfly',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='unknown',
            os='dragonfly',
            env='',
            abi='',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'x86_64-unknown-freebsd',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='unknown',
            os='freebsd',
            env='',
            abi='',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'x86_64-unknown-fuchsia',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='unknown',
            os='fuchsia',
            env='',
            abi='',
        ),
        'cmpxchg16b,fxsr,popcnt,sse,sse2,sse3,sse4.1,sse4.2,ssse3,x87',
    ),
    (
        'x86_64-unknown-haiku',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='unknown',
            os='haiku',
            env='',
            abi='',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'x86_64-unknown-hermit',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='unknown',
            os='hermit',
            env='',
            abi='',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'x86_64-unknown-illumos',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='unknown',
            os='illumos',
            env='',
            abi='',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'x86_64-unknown-l4re-uclibc',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='unknown',
            os='l4re',
            env='uclibc',
            abi='',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'x86_64-unknown-linux-gnu',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='unknown',
            os='linux',
            env='gnu',
            abi='',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'x86_64-unknown-linux-gnux32',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='unknown',
            os='linux',
            env='gnu',
            abi='x32',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'x86_64-unknown-linux-musl',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='unknown',
            os='linux',
            env='musl',
            abi='',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'x86_64-unknown-linux-none',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='unknown',
            os='linux',
            env='',
            abi='',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'x86_64-unknown-linux-ohos',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='unknown',
            os='linux',
            env='ohos',
            abi='',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'x86_64-unknown-netbsd',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='unknown',
            os='netbsd',
            env='',
            abi='',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'x86_64-unknown-none',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='unknown',
            os='none',
            env='',
            abi='',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'x86_64-unknown-openbsd',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='unknown',
            os='openbsd',
            env='',
            abi='',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'x86_64-unknown-redox',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='unknown',
            os='redox',
            env='relibc',
            abi='',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'x86_64-unknown-uefi',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='unknown',
            os='uefi',
            env='',
            abi='',
        ),
        'x87',
    ),
    (
        'x86_64-uwp-windows-gnu',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='uwp',
            os='windows',
            env='gnu',
            abi='uwp',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'x86_64-uwp-windows-msvc',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='uwp',
            os='windows',
            env='msvc',
            abi='uwp',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'x86_64-wrs-vxworks',
        TargetInfo(
            full_arch='x86_64',
            arch='x86_64',
            vendor='wrs',
            os='vxworks',
            env='gnu',
            abi='',
        ),
        'fxsr,sse,sse2,x87',
    ),
    (
        'x86_64h-apple-darwin',
        TargetInfo(
            full_arch='x86_64h',
            arch='x86_64',
            vendor='apple',
            os='macos',
            env='',
            abi='',
        ),
        'avx,avx2,bmi1,bmi2,cmpxchg16b,fma,fxsr,lzcnt,movbe,popcnt,sse,sse2,sse3,sse4.1,sse4.2,ssse3,x87',
    ),
    (
        'xtensa-esp32-espidf',
        TargetInfo(
            full_arch='xtensa',
            arch='xtensa',
            vendor='espressif',
            os='espidf',
            env='newlib',
            abi='',
        ),
        '',
    ),
    (
        'xtensa-esp32-none-elf',
        TargetInfo(
            full_arch='xtensa',
            arch='xtensa',
            vendor='espressif',
            os='none',
            env='',
            abi='',
        ),
        '',
    ),
)
